"""Tests for logger configuration."""

from loguru import logger

from lumbar.core.logger import setup_logger


class TestSetupLogger:
    def test_file_sink_receives_messages(self, tmp_path):
        log_file = tmp_path / "logs" / "lumbar.log"
        setup_logger(level="INFO", log_file=str(log_file))
        try:
            logger.debug("below threshold")
            logger.info("session started")
        finally:
            # Closes the file sink
            setup_logger(level="INFO")

        content = log_file.read_text()
        assert "session started" in content
        assert "below threshold" not in content
