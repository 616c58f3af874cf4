"""Tests for stacklog.sink — console channels and grouping."""

from stacklog.levels import Severity
from stacklog.sink import ConsoleSink


def test_log_joins_args(sink, buf):
    sink.log("a", 1, None)
    assert buf.getvalue() == "a 1 None\n"


def test_warn_and_error_prefixes(sink, buf):
    sink.warn("careful")
    sink.error("broken")
    assert buf.getvalue() == "[WARN] careful\nERROR: broken\n"


def test_group_indents_body(sink, buf):
    with sink.group("From f@a.py:1:0"):
        sink.log("inside")
        with sink.group("nested"):
            sink.log("deeper")
    sink.log("outside")
    assert buf.getvalue().splitlines() == [
        "From f@a.py:1:0",
        "  inside",
        "  nested",
        "    deeper",
        "outside",
    ]


def test_multiline_args_indented(sink, buf):
    with sink.group("g"):
        sink.log("one\ntwo")
    assert buf.getvalue().splitlines() == ["g", "  one", "  two"]


def test_channel_mapping(sink):
    assert sink.channel(Severity.TRACE) == sink.log
    assert sink.channel(Severity.INFO) == sink.log
    assert sink.channel(Severity.WARN) == sink.warn
    assert sink.channel(Severity.ERROR) == sink.error


def test_default_stream_is_stderr(capsys):
    ConsoleSink().error("to stderr")
    captured = capsys.readouterr()
    assert "ERROR: to stderr" in captured.err
    assert captured.out == ""
