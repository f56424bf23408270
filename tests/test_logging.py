"""Tests for the loguru sink setup."""
import sys

from loguru import logger
import pytest

from marblevo.utils.logger_setup import resolve_level, setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestResolveLevel:
    def test_verbose_raises_to_debug(self):
        assert resolve_level("INFO", verbose=True) == "DEBUG"
        assert resolve_level("warning", verbose=True) == "DEBUG"

    def test_verbose_keeps_trace(self):
        assert resolve_level("TRACE", verbose=True) == "TRACE"

    def test_quiet_keeps_level(self):
        assert resolve_level("info", verbose=False) == "INFO"


class TestSetupLogger:
    def test_file_sink_written(self, tmp_path, restore_logger):
        log_file = setup_logger(log_dir=tmp_path / "logs", level="INFO", enable_colors=False)

        logger.info("[Test] generation finished")
        logger.debug("[Test] hidden")
        logger.remove()

        text = log_file.read_text(encoding="utf-8")
        assert log_file.parent == tmp_path / "logs"
        assert "[Test] generation finished" in text
        assert "[Test] hidden" not in text

    def test_verbose_file_contains_debug(self, tmp_path, restore_logger):
        log_file = setup_logger(log_dir=tmp_path, enable_colors=False, verbose=True)

        logger.debug("[Test] individual traced")
        logger.remove()

        assert "[Test] individual traced" in log_file.read_text(encoding="utf-8")

    def test_console_only(self, restore_logger):
        assert setup_logger(log_dir=None, enable_colors=False) is None
