from __future__ import annotations

import logging
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from filedigest.util.logging import LOGGER_NAME, configure_logging


class LoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_configure_logging_creates_handlers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "filedigest.log"
            logger = configure_logging(log_path=log_path)
            logger.info("hello")

            self.assertTrue(log_path.exists())
            contents = log_path.read_text(encoding="utf-8")
            self.assertIn("hello", contents)

    def test_configure_logging_is_idempotent(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "filedigest.log"
            configure_logging(log_path=log_path)
            logger = configure_logging(log_path=log_path)

            self.assertEqual(len(logger.handlers), 2)

    def test_library_loggers_propagate(self) -> None:
        logger = configure_logging(level=logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logging.getLogger("filedigest.digest.registry").getEffectiveLevel(), logging.DEBUG)

    def test_stream_handler_writes_to_stderr(self) -> None:
        logger = configure_logging()
        streams = [
            h.stream
            for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(streams, [sys.stderr])


if __name__ == "__main__":
    unittest.main()
