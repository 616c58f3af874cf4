"""
Filter chain — predicates that can veto a record before any hook sees it.

Filters are registered against a severity. A filter registered at a
concrete level covers calls at that level and above; a filter registered
at ALL covers every call. Predicates receive the call's full argument
tuple and suppress the record by returning a truthy value.

Coverage runs upward on purpose: a WARN filter silences WARN and ERROR but
not INFO. The JavaScript logger this replaces checked the other direction
(registered level and below); do not flip the comparison in _applicable().
"""

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

from .levels import Severity

Predicate = Callable[[Sequence[Any]], bool]


@dataclass
class FilterEntry:
    predicate: Predicate
    seq: int


class FilterChain:
    """Per-severity lists of suppression predicates."""

    def __init__(self, on_invalid: Callable[..., None] = None):
        self.on_invalid = on_invalid
        self._counter = itertools.count()
        self._filters: Dict[Severity, List[FilterEntry]] = {
            sev: [] for sev in Severity
        }

    def add_filter(self, predicate: Predicate, severity: Any = Severity.ALL) -> bool:
        sev = Severity.coerce(severity)
        if sev is None:
            if self.on_invalid is not None:
                self.on_invalid(f"Logger: invalid severity {severity!r}")
            return False
        self._filters[sev].append(FilterEntry(predicate, next(self._counter)))
        return True

    def _applicable(self, severity: Severity) -> List[FilterEntry]:
        entries = [entry
                   for sev, bucket in self._filters.items()
                   if sev is Severity.ALL or sev <= severity
                   for entry in bucket]
        entries.sort(key=lambda entry: entry.seq)
        return entries

    def should_suppress(self, args: Sequence[Any], severity: Severity) -> bool:
        """True when any applicable predicate accepts ``args``.

        Stops at the first predicate that does. Exceptions raised by a
        predicate propagate to the caller.
        """
        for entry in self._applicable(severity):
            if entry.predicate(args):
                return True
        return False

    def filters_for(self, severity: Any) -> List[Predicate]:
        """Predicates registered exactly at ``severity``."""
        sev = Severity.coerce(severity)
        if sev is None:
            return []
        return [entry.predicate for entry in self._filters[sev]]
