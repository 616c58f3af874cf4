"""
Hook dispatcher — sink callbacks invoked for every surviving record.

A hook is called as ``hook(severity, wants_trace, *args)``. Hooks run for
records of exactly the severity they were registered at; hooks registered
at ALL run for every record. Across both groups, hooks fire in the order
they were registered.

There is no isolation between hooks: an exception raised by one stops the
remaining hooks for that record and propagates to the logging call.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from .levels import Severity

Hook = Callable[..., Any]


@dataclass
class LogRecord:
    severity: Severity
    args: Tuple[Any, ...] = field(default_factory=tuple)
    wants_trace: bool = False


@dataclass
class HookEntry:
    callback: Hook
    seq: int


class HookDispatcher:
    """Per-severity ordered lists of hooks."""

    def __init__(self, on_invalid: Callable[..., None] = None):
        self.on_invalid = on_invalid
        self._counter = itertools.count()
        self._hooks: Dict[Severity, List[HookEntry]] = {
            sev: [] for sev in Severity
        }

    def add_hook(self, callback: Hook, severity: Any = Severity.ALL) -> bool:
        sev = Severity.coerce(severity)
        if sev is None:
            if self.on_invalid is not None:
                self.on_invalid(f"Logger: invalid severity {severity!r}")
            return False
        self._hooks[sev].append(HookEntry(callback, next(self._counter)))
        return True

    def hooks_for(self, severity: Severity) -> List[Hook]:
        """Hooks that fire for a record at ``severity``, in firing order."""
        entries = list(self._hooks[severity])
        if severity is not Severity.ALL:
            entries.extend(self._hooks[Severity.ALL])
        entries.sort(key=lambda entry: entry.seq)
        return [entry.callback for entry in entries]

    def dispatch(self, record: LogRecord) -> None:
        for hook in self.hooks_for(record.severity):
            hook(record.severity, record.wants_trace, *record.args)
