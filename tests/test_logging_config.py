"""Tests for CLI logging setup."""

import logging

from voxel_shapes.logging_config import setup_logging


class TestSetupLogging:
    def test_repeated_setup_keeps_one_handler(self):
        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "voxels.log"
        logger = setup_logging(logging.INFO, str(log_file))
        logging.getLogger("voxel_shapes.host").info("sphere failed")
        for handler in logger.handlers:
            handler.flush()
        assert "sphere failed" in log_file.read_text()
        setup_logging()
