"""
Stack trim levels.

A trim level is how many lines to cut from one end of a captured stack
before parsing. Each end has its own stack of levels so a wrapper can
override the depth for the duration of a call and restore it afterwards.
The first element is the permanent base and can never be popped.
"""

from contextlib import contextmanager
from typing import Iterator, List


class TrimLevelStack:
    """Push/pop-able trim level with a permanent base value."""

    def __init__(self, base: int = 0):
        self._levels: List[int] = [_check_level(base)]

    def push(self, level: int) -> None:
        self._levels.append(_check_level(level))

    def pop(self) -> None:
        """Drop the top level; a no-op when only the base is left."""
        if len(self._levels) > 1:
            self._levels.pop()

    def current(self) -> int:
        return self._levels[-1]

    @property
    def depth(self) -> int:
        return len(self._levels)

    @contextmanager
    def scoped(self, level: int) -> Iterator[int]:
        """Use ``level`` inside the block, restoring the previous one on exit."""
        self.push(level)
        try:
            yield level
        finally:
            self.pop()

    def __repr__(self) -> str:
        return f"TrimLevelStack({self._levels!r})"


def _check_level(level: int) -> int:
    if level < 0:
        raise ValueError(f"trim level must be non-negative, got {level}")
    return level
