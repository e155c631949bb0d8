"""Tests for the JSON log formatter."""

import json
import logging
import sys
import unittest
from datetime import datetime, timezone

from utils.logging import JSONFormatter


def _record(msg="User registered", **extra):
    record = logging.LogRecord("services.auth_service", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):

    def test_extra_fields_become_top_level_keys(self):
        line = JSONFormatter().format(_record(userId="u-1", email="asha@example.com"))
        data = json.loads(line)

        self.assertEqual(data["message"], "User registered")
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "services.auth_service")
        self.assertEqual(data["userId"], "u-1")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_unserializable_values_rendered_as_strings(self):
        expire = datetime(2026, 1, 1, tzinfo=timezone.utc)
        data = json.loads(JSONFormatter().format(_record(expire=expire)))
        self.assertEqual(data["expire"], str(expire))

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "api.errors", logging.ERROR, __file__, 1, "Unhandled error", None, sys.exc_info(),
            )
        data = json.loads(JSONFormatter().format(record))
        self.assertIn("RuntimeError: boom", data["exception"])


if __name__ == '__main__':
    unittest.main()
