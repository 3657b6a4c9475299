"""Tests for structured logging configuration."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

import variantkit
from variantkit import Success, define_method, equality, init, union
from variantkit._logging import LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def host_handler() -> Generator[logging.Handler]:
    """A handler the host application put on the root logger."""
    root = logging.getLogger()
    handler = logging.StreamHandler()
    level = root.level
    root.addHandler(handler)
    yield handler
    root.removeHandler(handler)
    root.setLevel(level)


def _stream_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if not isinstance(handler, logging.NullHandler)]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_library_level(self) -> None:
        logger = configure_logging(level='DEBUG')
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert configure_logging(level='chatty').level == logging.INFO

    def test_installs_processor_formatter(self) -> None:
        logger = configure_logging(json_output=False)
        handlers = _stream_handlers(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging(level='INFO')
        logger = configure_logging(level='WARNING')
        assert len(_stream_handlers(logger)) == 1
        assert logger.level == logging.WARNING

    def test_does_not_propagate(self) -> None:
        assert configure_logging().propagate is False

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='INFO', json_output=True)
        get_logger(f'{LOGGER_NAME}.tests').info('hello', answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err


class TestHostLogging:
    """The host application's logging setup survives variantkit's."""

    def test_init_keeps_root_handlers(self, host_handler: logging.Handler) -> None:
        root = logging.getLogger()
        level = root.level
        init(log_level='INFO')
        assert host_handler in root.handlers
        assert root.level == level

    def test_configure_keeps_root_handlers(self, host_handler: logging.Handler) -> None:
        configure_logging(level='DEBUG')
        assert host_handler in logging.getLogger().handlers
        assert host_handler not in logging.getLogger(LOGGER_NAME).handlers


class TestLibraryEvents:
    """What the library itself logs."""

    def test_import_prints_nothing(self) -> None:
        """Importing the package writes nothing to stdout or stderr."""
        src = Path(variantkit.__file__).resolve().parents[1]
        env = {**os.environ, 'PYTHONPATH': os.pathsep.join(filter(None, [str(src), os.environ.get('PYTHONPATH')]))}
        result = subprocess.run(
            [sys.executable, '-c', 'import variantkit'],
            capture_output=True,
            text=True,
            env=env,
            check=False,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout == ''
        assert result.stderr == ''

    def test_definitions_are_quiet(self) -> None:
        with capture_logs() as logs:
            Flag = union('tests:Flag', {'Up': lambda: {}, 'Down': lambda: {}})
            define_method(Flag, 'flip', {'Up': lambda self: Flag.Down(), 'Down': lambda self: Flag.Up()})
            Flag.derive(equality)
        assert logs == []

    def test_deprecation_event(self) -> None:
        with capture_logs() as logs, pytest.warns(DeprecationWarning):
            Success(1).get()
        assert logs[0]['event'] == 'deprecated_call'
        assert 'unsafe_get' in logs[0]['message']
