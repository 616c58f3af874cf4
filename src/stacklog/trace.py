"""
Function tracing decorator.

Routes call tracing through the default Logger at TRACE severity, without
stack traces, so hooks and filters see it like any other record.
"""

import functools
import inspect
from pathlib import Path

from .levels import Severity


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the default Logger.

    Logs entry with arguments, exit with the return value (if not None),
    and exceptions (re-raised) when TRACE is enabled.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_logger

        log = get_logger()
        if not log.is_enabled(Severity.TRACE):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        name = f"{module.__name__ if module else 'unknown'}.{func.__qualname__}"

        args_repr = [_short_repr(a) for a in args]
        args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        log.log_trace_only(f">> {name}({', '.join(args_repr)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.log_trace_only(f"!! {name} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            log.log_trace_only(f"<< {name} returned: {_short_repr(result)}")
        return result

    return wrapper
