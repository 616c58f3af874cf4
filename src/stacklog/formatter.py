"""Render parsed stack frames as ``name@file:line:column`` lines."""

from typing import Sequence

from .frames import StackFrame
from .paths import strip_common_prefix


def format_frame(frame: StackFrame, path: str = None) -> str:
    file = frame.file if path is None else path
    return f"{frame.name}@{file}:{frame.line}:{frame.column}"


def format_stack(frames: Sequence[StackFrame], compact: bool = True) -> str:
    """Format frames one per line, with shared path prefixes removed.

    Compaction runs over the files of all frames together.
    """
    paths = [frame.file for frame in frames]
    if compact:
        paths = strip_common_prefix(paths)
    if len(paths) != len(frames):
        raise RuntimeError(
            f"path compaction returned {len(paths)} paths for {len(frames)} frames")
    return "\n".join(format_frame(frame, path)
                     for frame, path in zip(frames, paths))
