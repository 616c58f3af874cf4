"""Tests for stacklog.trace — the call tracing decorator."""

from pathlib import Path

import pytest

from stacklog import init_logging, trace
from stacklog.levels import TRACE, Severity
from stacklog.sink import ConsoleSink


@trace
def add(a, b):
    return a + b


@trace
def fail(msg):
    raise ValueError(msg)


@trace
def nothing(items):
    return None


@trace
def touch(src, dest=None):
    return None


class TestTraceDecorator:

    def test_silent_when_trace_disabled(self, buf):
        init_logging(sink=ConsoleSink(file=buf))
        assert add(2, 3) == 5
        assert buf.getvalue() == ""

    def test_entry_and_exit(self, buf):
        init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        assert add(2, 3) == 5
        lines = buf.getvalue().splitlines()
        assert lines == [
            f">> {__name__}.add(2, 3)",
            f"<< {__name__}.add returned: 5",
        ]

    def test_exception_logged_and_reraised(self, buf):
        init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        with pytest.raises(ValueError):
            fail("bad input")
        assert "!! " in buf.getvalue()
        assert "fail raised: ValueError: bad input" in buf.getvalue()

    def test_none_return_not_logged(self, buf):
        init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        nothing([1, 2, 3, 4, 5])
        assert buf.getvalue().splitlines() == [
            f">> {__name__}.nothing([...5 items...])",
        ]

    def test_abbreviates_long_values(self, buf):
        init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        add("x" * 60, "y")
        assert "'xxxxx" in buf.getvalue()
        assert "...'" in buf.getvalue()

    def test_path_and_kwargs(self, buf):
        init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        assert touch(Path("p"), dest=Path("q")) is None
        assert buf.getvalue().splitlines() == [
            f">> {__name__}.touch(Path('p'), dest=Path('q'))",
        ]

    def test_exception_after_entry_line(self, buf):
        init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        with pytest.raises(TypeError):
            add(a=Path("p"), b=Path("q"))
        lines = buf.getvalue().splitlines()
        assert lines[0] == f">> {__name__}.add(a=Path('p'), b=Path('q'))"
        assert lines[1].startswith(f"!! {__name__}.add raised: TypeError: ")

    def test_records_go_through_hooks(self, buf):
        log = init_logging(verbosity=TRACE, sink=ConsoleSink(file=buf))
        seen = []
        log.add_hook(lambda sev, traced, *args: seen.append((sev, traced)))
        add(1, 1)
        assert seen == [(Severity.TRACE, False), (Severity.TRACE, False)]

    def test_preserves_metadata(self):
        assert add.__name__ == "add"
