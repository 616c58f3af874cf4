"""
stacklog — severity-gated diagnostic logging with parsed stack traces.

Provides:
- Five ordered severities behind a verbosity knob
- Filters that veto records and hooks that receive them
- Stack capture with push/pop trim levels
- Frame parsing for V8, SpiderMonkey and CPython trace text
- Common-prefix compaction of frame paths

Public API:
    Logger           — the facade and its state
    init_logging     — initialize the default Logger
    get_logger       — access the default Logger
    log_trace … log_error            — log with a stack trace
    log_trace_only … log_error_only  — log without one
    add_hook, add_filter, set_verbosity, get_stack
    Severity, OFF, DEBUG, TRACE
    StackFrame, Runtime, identify_runtime
    strip_common_prefix, format_stack
    resolve_settings — layered configuration
    trace            — function tracing decorator
"""

from stacklog._version import __version__, __app_name__
from stacklog.config import Settings, resolve_settings
from stacklog.formatter import format_stack
from stacklog.frames import Runtime, StackFrame, identify_runtime
from stacklog.hooks import LogRecord
from stacklog.levels import DEBUG, OFF, TRACE, Severity
from stacklog.manager import (
    Logger, init_logging, get_logger, reset_logging,
    log_trace, log_debug, log_info, log_warn, log_error,
    log_trace_only, log_debug_only, log_info_only, log_warn_only,
    log_error_only,
    add_hook, add_filter, set_verbosity, get_stack,
)
from stacklog.paths import strip_common_prefix
from stacklog.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'Logger', 'init_logging', 'get_logger', 'reset_logging',
    'log_trace', 'log_debug', 'log_info', 'log_warn', 'log_error',
    'log_trace_only', 'log_debug_only', 'log_info_only', 'log_warn_only',
    'log_error_only',
    'add_hook', 'add_filter', 'set_verbosity', 'get_stack',
    'Severity', 'OFF', 'DEBUG', 'TRACE',
    'LogRecord', 'StackFrame', 'Runtime', 'identify_runtime',
    'strip_common_prefix', 'format_stack',
    'Settings', 'resolve_settings',
    'trace',
]
