"""Shared test fixtures for the stacklog test suite."""

import io
import os
from unittest.mock import patch

import pytest

from stacklog import manager as _manager_mod
from stacklog.frames import Runtime
from stacklog.levels import TRACE
from stacklog.manager import Logger
from stacklog.sink import ConsoleSink


# ---------------------------------------------------------------------------
# Canned V8 stack, innermost first, as the capture source would return it:
# the capture call, the logger's internals, then the application frames.
# ---------------------------------------------------------------------------
V8_LOGGER_STACK = [
    "    at StackCapturer.capture (https://example.com/lib/stacklog.js:1:10)",
    "    at Logger._to_sink (https://example.com/lib/stacklog.js:2:10)",
    "    at Logger._log (https://example.com/lib/stacklog.js:3:10)",
    "    at Logger.log_warn (https://example.com/lib/stacklog.js:4:10)",
    "    at onClick (https://example.com/app/js/main.js:10:5)",
    "    at dispatch (https://example.com/app/js/events.js:20:7)",
]


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_default_logger():
    """Give every test a fresh module-level Logger."""
    old = _manager_mod._logger
    _manager_mod._logger = None
    yield
    _manager_mod._logger = old


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep STACKLOG_* variables from the developer's shell out of tests."""
    monkeypatch.delenv("STACKLOG_VERBOSITY", raising=False)
    monkeypatch.delenv("STACKLOG_USER_AGENT", raising=False)


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing sink output."""
    return io.StringIO()


@pytest.fixture
def sink(buf):
    """A ConsoleSink writing to the buffer."""
    return ConsoleSink(file=buf)


@pytest.fixture
def logger(sink):
    """A Logger with everything enabled, on the real interpreter stack."""
    return Logger(verbosity=TRACE, sink=sink)


@pytest.fixture
def v8_logger(sink):
    """A Logger parsing the canned V8 stack; ``calls`` counts captures."""
    calls = []

    def source():
        calls.append(1)
        return list(V8_LOGGER_STACK)

    log = Logger(verbosity=TRACE, sink=sink, runtime=Runtime.CHROME,
                 stack_source=source)
    log.capture_calls = calls
    return log


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.stacklog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory (no .stacklog.json yet)."""
    proj = tmp_path / "project"
    proj.mkdir()
    return proj
