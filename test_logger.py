"""
Tests for the stdout/file logging utilities
"""

import logging
import re

import pytest

from src.utils.config_manager import config
from src.utils.logger import DemoLogger, IsoTimestampFormatter, get_logger


def test_console_line_format(capsys):
    logger = get_logger('format_test')
    logger.info("App heartbeat log")

    out = capsys.readouterr().out

    assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] App heartbeat log\n", out)


def test_timestamp_is_utc_iso8601():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    record.created = 0.5

    assert IsoTimestampFormatter().formatTime(record) == "1970-01-01T00:00:00.500Z"


def test_repeated_get_logger_does_not_duplicate_lines(capsys):
    get_logger('dup_test')
    logger = get_logger('dup_test')
    logger.info("once")

    assert capsys.readouterr().out.count("once") == 1


def test_level_filters_messages(capsys):
    logger = get_logger('level_test', level='WARNING')
    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out

    assert "hidden" not in out
    assert "shown" in out


def test_stdout_only_by_default():
    logger = get_logger('stdout_only_test')

    assert logger.log_dir is None
    assert len(logger.logger.handlers) == 1


def test_log_dir_adds_rotating_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config, '_config', {'logging': {'log_dir': str(tmp_path / 'logs')}})

    logger = get_logger('file_test')
    logger.info("GET / request received")
    for handler in logger.logger.handlers:
        handler.flush()

    files = list((tmp_path / 'logs').glob('file_test_*.log'))
    assert len(files) == 1
    assert files[0].read_text(encoding='utf-8').rstrip().endswith("] GET / request received")

    for handler in logger.logger.handlers:
        handler.close()
    logger.logger.handlers.clear()


@pytest.mark.parametrize("size, expected", [
    ("512", 512),
    ("10KB", 10 * 1024),
    ("10mb", 10 * 1024 * 1024),
    ("1GB", 1024 ** 3),
    (2048, 2048),
])
def test_parse_file_size(size, expected):
    assert DemoLogger('size_test')._parse_file_size(size) == expected
