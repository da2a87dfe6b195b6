"""
Tests for the logging setup driven by LoggingSettings.
"""

import pytest

from flightcodes.config import LoggingSettings
from flightcodes.utils.logger import logger, setup_logger


@pytest.fixture(autouse=True)
def restore_default_logging():
    yield
    setup_logger(LoggingSettings())


def test_file_sink_is_written_when_enabled(tmp_path):
    settings = LoggingSettings(log_dir=str(tmp_path / "logs"), log_file="run.log", enable_file=True)

    log_path = setup_logger(settings)
    logger.info("Loaded 10 records")
    setup_logger(LoggingSettings())  # closes the file sink

    assert log_path == tmp_path / "logs" / "run.log"
    assert "INFO    | " in log_path.read_text(encoding="utf-8")
    assert "Loaded 10 records" in log_path.read_text(encoding="utf-8")


def test_no_file_sink_by_default(tmp_path):
    settings = LoggingSettings(log_dir=str(tmp_path / "logs"))

    assert setup_logger(settings) is None
    assert not (tmp_path / "logs").exists()


def test_level_argument_overrides_settings(capsys):
    """The --log-level flag wins over LOG_LEVEL."""
    setup_logger(LoggingSettings(level="DEBUG"), level="warning")

    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_settings_level_applies_without_override(capsys):
    setup_logger(LoggingSettings(level="ERROR"))

    logger.warning("hidden")

    assert "hidden" not in capsys.readouterr().out
