import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ui.logging_utils import setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level
        self.root.handlers = []

    def tearDown(self) -> None:
        for handler in self.root.handlers:
            handler.close()
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_writes_to_configured_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "plagcheck.log"
            env = {"PLAGCHECK_LOG_FILE": str(log_path), "PLAGCHECK_LOG_LEVEL": "debug"}
            with mock.patch.dict(os.environ, env):
                setup_logging()
            self.assertEqual(self.root.level, logging.DEBUG)
            self.assertEqual(len(self.root.handlers), 2)
            logging.getLogger("plagcheck.test").info("corpus ready")
            for handler in self.root.handlers:
                handler.flush()
            self.assertIn("corpus ready", log_path.read_text(encoding="utf-8"))

    def test_empty_log_file_means_console_only(self):
        with mock.patch.dict(os.environ, {"PLAGCHECK_LOG_FILE": ""}):
            setup_logging("warning")
        self.assertEqual(len(self.root.handlers), 1)
        self.assertEqual(self.root.level, logging.WARNING)

    def test_is_idempotent(self):
        with mock.patch.dict(os.environ, {"PLAGCHECK_LOG_FILE": ""}):
            setup_logging()
            setup_logging()
        self.assertEqual(len(self.root.handlers), 1)


if __name__ == "__main__":
    unittest.main()
