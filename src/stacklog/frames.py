"""
Stack frame parsing.

Turns one raw stack-trace line into a StackFrame. The text format depends
on the runtime that produced the trace, so the parser is chosen once from
a runtime probe rather than re-detected per line:

    CHROME   "    at foo [as bar] (https://host/app.js:10:5)"
    FIREFOX  "foo@https://host/app.js:10:5"
    PYTHON   '  File "/src/app.py", line 10, in foo'
    UNKNOWN  nothing parses (and nothing is reported)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional


@dataclass(frozen=True)
class StackFrame:
    name: str
    file: str
    line: int
    column: int = 0
    alias: Optional[str] = None


class Runtime(Enum):
    CHROME = 'Chrome'
    FIREFOX = 'Firefox'
    PYTHON = 'Python'
    UNKNOWN = 'Unknown'


_FIREFOX_UA = re.compile(r'\bFirefox/[0-9.]+\b')
_CHROME_UA = re.compile(r'\bChrome/[0-9.]+\b')


def identify_runtime(user_agent: Optional[str] = None) -> Runtime:
    """Identify the runtime whose traces we will be parsing.

    A browser user-agent string selects its engine's format; no user agent
    means traces come from this interpreter.
    """
    if user_agent is None:
        return Runtime.PYTHON
    if _FIREFOX_UA.search(user_agent):
        return Runtime.FIREFOX
    if _CHROME_UA.search(user_agent):
        return Runtime.CHROME
    return Runtime.UNKNOWN


class FrameParser:
    """Base class for per-runtime parsers.

    Subclasses provide ``pattern`` and ``_frame_from_match``. Lines that do
    not match are dropped; when ``reports_failures`` is set each one is
    reported once through ``on_error``.
    """

    pattern: Optional['re.Pattern'] = None
    format_name = 'none'
    reports_failures = True

    def __init__(self, on_error: Callable[..., None] = None):
        self.on_error = on_error

    def try_parse(self, line: str) -> Optional[StackFrame]:
        if self.pattern is None:
            return None
        m = self.pattern.match(line)
        if m is None:
            return None
        return self._frame_from_match(m)

    def parse_line(self, line: str) -> Optional[StackFrame]:
        frame = self.try_parse(line)
        if frame is None and self.reports_failures and self.on_error is not None:
            self.on_error("Failed to parse stack frame", line)
        return frame

    def parse_stack(self, lines: Iterable[str]) -> List[StackFrame]:
        frames = []
        for line in lines:
            frame = self.parse_line(line)
            if frame is not None:
                frames.append(frame)
        return frames

    def _frame_from_match(self, m: 're.Match') -> StackFrame:
        raise NotImplementedError


class V8FrameParser(FrameParser):
    """``at <name>[ [as <alias>]] (<file>:<line>:<column>)``"""

    pattern = re.compile(
        r'^\s*at ([^ ]+)(?: \[as (\w+)\])? \((.*):([0-9]+):([0-9]+)\)$')
    format_name = 'at <name> [as <alias>] (<file>:<line>:<column>)'

    def _frame_from_match(self, m):
        return StackFrame(name=m.group(1), alias=m.group(2), file=m.group(3),
                          line=int(m.group(4)), column=int(m.group(5)))


class GeckoFrameParser(FrameParser):
    """``<name>@<file>:<line>:<column>``"""

    pattern = re.compile(r'^\s*([^@]*)@(.*):([0-9]+):([0-9]+)$')
    format_name = '<name>@<file>:<line>:<column>'

    def _frame_from_match(self, m):
        return StackFrame(name=m.group(1), file=m.group(2),
                          line=int(m.group(3)), column=int(m.group(4)))


class PythonFrameParser(FrameParser):
    """``File "<file>", line <line>, in <name>`` as printed by traceback."""

    pattern = re.compile(r'^\s*File "(.*)", line ([0-9]+), in (.+?)\s*$')
    format_name = 'File "<file>", line <line>, in <name>'

    def _frame_from_match(self, m):
        return StackFrame(name=m.group(3), file=m.group(1),
                          line=int(m.group(2)), column=0)


class NullFrameParser(FrameParser):
    """Parser for runtimes we do not understand: yields no frames."""

    reports_failures = False


_PARSERS = {
    Runtime.CHROME: V8FrameParser,
    Runtime.FIREFOX: GeckoFrameParser,
    Runtime.PYTHON: PythonFrameParser,
    Runtime.UNKNOWN: NullFrameParser,
}


def parser_for_runtime(runtime: Runtime,
                       on_error: Callable[..., None] = None) -> FrameParser:
    """Build the frame parser for an identified runtime."""
    return _PARSERS[runtime](on_error=on_error)
