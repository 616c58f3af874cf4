"""
Severity levels and the verbosity knob.

Severities are totally ordered; ALL is a registration-only sentinel that
sorts above every concrete level:

    TRACE < DEBUG < INFO < WARN < ERROR  (< ALL)

The verbosity knob decides which severities are enabled:

    knob      enabled
    TRACE     everything
    DEBUG     DEBUG and above
    OFF       INFO and above
    (unset)   WARN and above

The knob and Severity share small integers with different meanings
(knob DEBUG is 1, Severity.TRACE is 1), so every knob value goes through
parse_verbosity(), which maps Severity members by name and rejects
anything that is not a knob.
"""

from enum import IntEnum
from typing import Any, Callable, Optional


class Severity(IntEnum):
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARN = 4
    ERROR = 5
    ALL = 6

    def __str__(self) -> str:
        return self.name

    @classmethod
    def coerce(cls, value: Any) -> Optional['Severity']:
        """Return the Severity for a member or level name, else None."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


# Concrete levels, lowest first (ALL excluded)
LEVELS = (Severity.TRACE, Severity.DEBUG, Severity.INFO,
          Severity.WARN, Severity.ERROR)

# Verbosity knob values
OFF = 0            # Debugging off: INFO and above
DEBUG = 1          # DEBUG and above
TRACE = 2          # Everything

VERBOSITY_NAMES = {
    'off': OFF,
    'debug': DEBUG,
    'trace': TRACE,
    'default': None,
}

# Severity members accepted as knob values
_SEVERITY_KNOBS = {
    Severity.TRACE: TRACE,
    Severity.DEBUG: DEBUG,
    Severity.INFO: OFF,
}


def parse_verbosity(value: Any) -> Optional[int]:
    """Convert a verbosity value to a knob value.

    Accepts knob names (case-insensitive), their integer values, the
    Severity members TRACE, DEBUG and INFO (INFO meaning OFF), or None.
    "default" and None both mean the WARN-and-above default.

    Raises:
        ValueError: for anything else.
    """
    if value is None:
        return None
    if isinstance(value, Severity):
        if value in _SEVERITY_KNOBS:
            return _SEVERITY_KNOBS[value]
        raise ValueError(f"Invalid verbosity: {value!r}")
    if isinstance(value, bool):
        raise ValueError(f"Invalid verbosity: {value!r}")
    if isinstance(value, int):
        if value in (OFF, DEBUG, TRACE):
            return value
        raise ValueError(f"Invalid verbosity: {value!r}")
    text = str(value).strip().lower()
    if text.isdigit():
        return parse_verbosity(int(text))
    if text in VERBOSITY_NAMES:
        return VERBOSITY_NAMES[text]
    raise ValueError(f"Invalid verbosity: {value!r} "
                     f"(expected one of {', '.join(VERBOSITY_NAMES)})")


class SeverityRegistry:
    """Answers "is severity X currently enabled" for a verbosity knob.

    ``on_invalid`` is called with a message when asked about an unknown
    severity; the query then answers False. Invalid knob values raise
    ValueError.
    """

    def __init__(self, verbosity: Optional[int] = None,
                 on_invalid: Callable[..., None] = None):
        self.verbosity = parse_verbosity(verbosity)
        self.on_invalid = on_invalid

    def set_verbosity(self, level: Any) -> None:
        self.verbosity = parse_verbosity(level)

    def is_enabled(self, severity: Any) -> bool:
        sev = Severity.coerce(severity)
        if sev is None or sev is Severity.ALL:
            if self.on_invalid is not None:
                self.on_invalid(f"Logger: invalid severity {severity!r}")
            return False
        if self.verbosity == TRACE:
            return True
        if self.verbosity == DEBUG:
            return sev >= Severity.DEBUG
        if self.verbosity == OFF:
            return sev >= Severity.INFO
        return sev >= Severity.WARN
