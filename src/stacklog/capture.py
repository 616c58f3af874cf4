"""
Call stack capture.

Captures the current stack as raw text lines, innermost frame first, then
applies the begin/end trim levels.
"""

import traceback
from typing import Callable, List

from .trim import TrimLevelStack


def native_stack_lines() -> List[str]:
    """Return the interpreter's stack as traceback text, innermost first.

    Only the ``File "...", line N, in name`` header of each entry is kept;
    this function's own frame is left out.
    """
    entries = traceback.format_list(traceback.extract_stack()[:-1])
    lines = [entry.splitlines()[0] for entry in entries]
    lines.reverse()
    return lines


class StackCapturer:
    """Capture raw stack lines and cut them down to the current trim levels."""

    def __init__(self, trim_begin: TrimLevelStack, trim_end: TrimLevelStack,
                 source: Callable[[], List[str]] = None):
        self.trim_begin = trim_begin
        self.trim_end = trim_end
        self.source = source if source is not None else native_stack_lines

    def capture(self) -> List[str]:
        lines = list(self.source())
        # First line is this method's own frame
        lines = lines[1:]
        lines = lines[self.trim_begin.current():]
        end = self.trim_end.current()
        if end:
            lines = lines[:-end] if end < len(lines) else []
        return lines
