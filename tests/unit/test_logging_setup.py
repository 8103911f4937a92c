import json
import logging
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_core.logging_setup import JsonFormatter, configure_logging, get_logger


class JsonFormatterTests(unittest.TestCase):
    def test_includes_event(self):
        record = logging.LogRecord("monogram.generator", logging.INFO, __file__, 1, "avatar generated", None, None)
        record.event = "avatar_generated"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "monogram.generator")
        self.assertEqual(payload["msg"], "avatar generated")
        self.assertEqual(payload["event"], "avatar_generated")
        self.assertIn("ts_utc", payload)

    def test_omits_missing_event(self):
        record = logging.LogRecord("monogram", logging.WARNING, __file__, 1, "plain", None, None)
        self.assertNotIn("event", json.loads(JsonFormatter().format(record)))


class ConfigureLoggingTests(unittest.TestCase):
    def test_idempotent(self):
        first = configure_logging(console=False)
        count = len(first.handlers)
        second = configure_logging(console=True)
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), count)

    def test_child_loggers(self):
        self.assertEqual(get_logger().name, "monogram")
        self.assertEqual(get_logger("fonts").name, "monogram.fonts")


if __name__ == "__main__":
    unittest.main()
