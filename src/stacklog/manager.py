"""
Logger — the stacklog facade and the state it owns.

One Logger holds everything a logging call consults: the verbosity knob,
filters, hooks, the two trim level stacks, the frame parser picked for the
runtime, and the sink. A call goes through:

    severity gate -> filters -> hooks -> sink
                                          (traced calls: capture, parse,
                                           compact and format the stack,
                                           printed as a "From ..." group)

Severity -> sink channel:
    TRACE, DEBUG, INFO   log
    WARN                 warn
    ERROR                error

Module-level functions operate on a default Logger, created lazily by
get_logger() or explicitly by init_logging().
"""

from contextlib import ExitStack, contextmanager
from typing import Any, Callable, Iterator, List, Optional

from .capture import StackCapturer
from .filters import FilterChain, Predicate
from .formatter import format_stack
from .frames import Runtime, StackFrame, identify_runtime, parser_for_runtime
from .hooks import Hook, HookDispatcher, LogRecord
from .levels import Severity, SeverityRegistry
from .sink import ConsoleSink
from .trim import TrimLevelStack


class Logger:
    """Severity-gated logger with hooks, filters and stack traces.

    Usage::

        log = Logger(verbosity=TRACE)
        log.add_hook(lambda sev, traced, *args: seen.append(args), 'WARN')
        log.add_filter(lambda args: 'noisy' in args)
        log.log_warn("disk almost full", pct)     # with a stack trace
        log.log_info_only("started")              # without
    """

    def __init__(
        self,
        verbosity: Optional[int] = None,
        user_agent: Optional[str] = None,
        runtime: Optional[Runtime] = None,
        sink: Optional[ConsoleSink] = None,
        stack_source: Callable[[], List[str]] = None,
        trim_begin: int = 0,
        trim_end: int = 0,
    ):
        self.sink = sink if sink is not None else ConsoleSink()
        self.severities = SeverityRegistry(verbosity, on_invalid=self._report_invalid)
        self.filters = FilterChain(on_invalid=self._report_invalid)
        self.hooks = HookDispatcher(on_invalid=self._report_invalid)
        self.trim_begin = TrimLevelStack(trim_begin)
        self.trim_end = TrimLevelStack(trim_end)
        self.runtime = runtime if runtime is not None else identify_runtime(user_agent)
        self.parser = parser_for_runtime(self.runtime, on_error=self._report_bad_frame)
        self.capturer = StackCapturer(self.trim_begin, self.trim_end,
                                      source=stack_source)

    # -- diagnostics ---------------------------------------------------------

    def _report_invalid(self, *args: Any) -> None:
        self.sink.error(*args)

    def _report_bad_frame(self, *args: Any) -> None:
        # Straight to the sink: going through _log could capture a trace again
        self.sink.log(*args)

    # -- configuration -------------------------------------------------------

    @property
    def verbosity(self) -> Optional[int]:
        return self.severities.verbosity

    def set_verbosity(self, level: Any) -> None:
        """Set the knob to OFF, DEBUG, TRACE or None; anything else raises ValueError."""
        self.severities.set_verbosity(level)

    def is_enabled(self, severity: Any) -> bool:
        return self.severities.is_enabled(severity)

    def add_hook(self, callback: Hook, severity: Any = Severity.ALL) -> bool:
        """Register ``callback(severity, wants_trace, *args)``."""
        return self.hooks.add_hook(callback, severity)

    def add_filter(self, predicate: Predicate, severity: Any = Severity.ALL) -> bool:
        """Register ``predicate(args) -> bool``; true suppresses the record."""
        return self.filters.add_filter(predicate, severity)

    # -- trim levels ---------------------------------------------------------

    def push_trim_begin(self, level: int) -> None:
        self.trim_begin.push(level)

    def pop_trim_begin(self) -> None:
        self.trim_begin.pop()

    def push_trim_end(self, level: int) -> None:
        self.trim_end.push(level)

    def pop_trim_end(self) -> None:
        self.trim_end.pop()

    def trim_begin_level(self) -> int:
        return self.trim_begin.current()

    def trim_end_level(self) -> int:
        return self.trim_end.current()

    @contextmanager
    def trimmed(self, begin: int = None, end: int = None) -> Iterator['Logger']:
        """Override either trim level for the duration of the block."""
        with ExitStack() as stack:
            if begin is not None:
                stack.enter_context(self.trim_begin.scoped(begin))
            if end is not None:
                stack.enter_context(self.trim_end.scoped(end))
            yield self

    # -- stacks --------------------------------------------------------------

    def _caller_frames(self, skip: int) -> List[StackFrame]:
        frames = self.parser.parse_stack(self.capturer.capture())
        return frames[skip:]

    def get_stack(self) -> List[StackFrame]:
        """Parsed frames of the calling code's stack, caller first."""
        return self._caller_frames(2)

    # -- logging -------------------------------------------------------------

    def _log(self, severity: Severity, args: tuple, wants_trace: bool) -> None:
        if not self.severities.is_enabled(severity):
            return
        if self.filters.should_suppress(args, severity):
            return
        record = LogRecord(severity, tuple(args), wants_trace)
        self.hooks.dispatch(record)
        channel = self.sink.channel(severity)
        if wants_trace:
            with self.trim_begin.scoped(max(self.trim_begin.current(), 1)):
                self._to_sink(channel, record.args)
        else:
            channel(*record.args)

    def _to_sink(self, channel: Callable[..., None], args: tuple) -> None:
        frames = self.parser.parse_stack(self.capturer.capture())
        # Trim level 1 hides this method; drop _log and the entry point too
        frames = frames[2:]
        with self.sink.group("From " + format_stack(frames)):
            channel(*args)

    def log_trace(self, *args: Any) -> None:
        self._log(Severity.TRACE, args, True)

    def log_debug(self, *args: Any) -> None:
        self._log(Severity.DEBUG, args, True)

    def log_info(self, *args: Any) -> None:
        self._log(Severity.INFO, args, True)

    def log_warn(self, *args: Any) -> None:
        self._log(Severity.WARN, args, True)

    def log_error(self, *args: Any) -> None:
        self._log(Severity.ERROR, args, True)

    def log_trace_only(self, *args: Any) -> None:
        self._log(Severity.TRACE, args, False)

    def log_debug_only(self, *args: Any) -> None:
        self._log(Severity.DEBUG, args, False)

    def log_info_only(self, *args: Any) -> None:
        self._log(Severity.INFO, args, False)

    def log_warn_only(self, *args: Any) -> None:
        self._log(Severity.WARN, args, False)

    def log_error_only(self, *args: Any) -> None:
        self._log(Severity.ERROR, args, False)


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[Logger] = None


def init_logging(verbosity: Optional[int] = None, user_agent: str = None,
                 sink: ConsoleSink = None, stack_source=None,
                 settings=None) -> Logger:
    """Initialize the module-level Logger.

    Call once at program startup. Explicit arguments win over ``settings``
    (a stacklog.config.Settings, e.g. from resolve_settings()).

    Returns:
        The initialized Logger instance
    """
    global _logger

    trim_begin = trim_end = 0
    if settings is not None:
        if verbosity is None:
            verbosity = settings.verbosity
        if user_agent is None:
            user_agent = settings.user_agent
        trim_begin, trim_end = settings.trim_begin, settings.trim_end

    _logger = Logger(
        verbosity=verbosity,
        user_agent=user_agent,
        sink=sink,
        stack_source=stack_source,
        trim_begin=trim_begin,
        trim_end=trim_end,
    )
    return _logger


def get_logger() -> Logger:
    """Get the module-level Logger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def reset_logging() -> None:
    """Forget the module-level Logger; the next get_logger() makes a new one."""
    global _logger
    _logger = None


# Each function calls _log directly so traces start at the caller,
# exactly as with the Logger methods.

def log_trace(*args: Any) -> None:
    get_logger()._log(Severity.TRACE, args, True)


def log_debug(*args: Any) -> None:
    get_logger()._log(Severity.DEBUG, args, True)


def log_info(*args: Any) -> None:
    get_logger()._log(Severity.INFO, args, True)


def log_warn(*args: Any) -> None:
    get_logger()._log(Severity.WARN, args, True)


def log_error(*args: Any) -> None:
    get_logger()._log(Severity.ERROR, args, True)


def log_trace_only(*args: Any) -> None:
    get_logger()._log(Severity.TRACE, args, False)


def log_debug_only(*args: Any) -> None:
    get_logger()._log(Severity.DEBUG, args, False)


def log_info_only(*args: Any) -> None:
    get_logger()._log(Severity.INFO, args, False)


def log_warn_only(*args: Any) -> None:
    get_logger()._log(Severity.WARN, args, False)


def log_error_only(*args: Any) -> None:
    get_logger()._log(Severity.ERROR, args, False)


def add_hook(callback: Hook, severity: Any = Severity.ALL) -> bool:
    return get_logger().add_hook(callback, severity)


def add_filter(predicate: Predicate, severity: Any = Severity.ALL) -> bool:
    return get_logger().add_filter(predicate, severity)


def set_verbosity(level: Any) -> None:
    get_logger().set_verbosity(level)


def get_stack() -> List[StackFrame]:
    """Parsed frames of the calling code's stack, caller first."""
    return get_logger()._caller_frames(2)
