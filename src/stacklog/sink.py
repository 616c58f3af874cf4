"""
Console sink — the diagnostic output channels the logger writes to.

Three channels (log, warn, error) plus grouping: lines written inside a
``group()`` block are indented under the group's header, the way a browser
console nests a group.
"""

import sys
from contextlib import contextmanager
from typing import Any, Iterator, TextIO

from .levels import Severity

INDENT = '  '


class ConsoleSink:
    """Writes space-joined ``str()`` of the arguments to a text stream.

    The stream defaults to ``sys.stderr``, looked up at write time so that
    redirection (and pytest's capsys) is honoured.
    """

    def __init__(self, file: TextIO = None):
        self._file = file
        self._depth = 0

    @property
    def file(self) -> TextIO:
        return self._file if self._file is not None else sys.stderr

    def _write(self, prefix: str, args: tuple) -> None:
        text = prefix + ' '.join(str(a) for a in args)
        pad = INDENT * self._depth
        for line in text.split('\n'):
            print(pad + line, file=self.file)

    def log(self, *args: Any) -> None:
        self._write('', args)

    def warn(self, *args: Any) -> None:
        self._write('[WARN] ', args)

    def error(self, *args: Any) -> None:
        self._write('ERROR: ', args)

    @contextmanager
    def group(self, header: str) -> Iterator[None]:
        self._write('', (header,))
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def channel(self, severity: Severity):
        """The output channel for records of ``severity``."""
        if severity is Severity.ERROR:
            return self.error
        if severity is Severity.WARN:
            return self.warn
        return self.log
