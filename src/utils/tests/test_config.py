"""Tests for Settings.from_env."""

import os
import unittest
from unittest.mock import patch

from utils.config import Settings

BASE_ENV = {"JWT_SECRET": "s3cret"}


def _load(env: dict) -> Settings:
    with patch.dict(os.environ, env, clear=True), \
            patch('utils.config.load_dotenv'):
        return Settings.from_env()


class TestSettingsFromEnv(unittest.TestCase):

    def test_missing_jwt_secret_refused(self):
        with self.assertRaises(ValueError) as ctx:
            _load({})
        self.assertIn("JWT_SECRET", str(ctx.exception))

    def test_defaults(self):
        settings = _load(BASE_ENV)

        self.assertEqual(settings.jwt_secret, "s3cret")
        self.assertIsNone(settings.mongo_url)
        self.assertEqual(settings.database_name, "urbansquare")
        self.assertFalse(settings.enable_email)
        self.assertEqual(settings.smtp_port, 587)
        self.assertEqual(settings.website_url, "http://localhost:3000")
        self.assertFalse(settings.llm_enabled)
        self.assertFalse(settings.admin_configured)

    def test_enable_email_only_for_literal_true(self):
        self.assertTrue(_load({**BASE_ENV, "ENABLE_EMAIL": "true"}).enable_email)
        self.assertTrue(_load({**BASE_ENV, "ENABLE_EMAIL": "TRUE"}).enable_email)
        self.assertFalse(_load({**BASE_ENV, "ENABLE_EMAIL": "1"}).enable_email)
        self.assertFalse(_load({**BASE_ENV, "ENABLE_EMAIL": "yes"}).enable_email)

    def test_email_from_falls_back_to_email_user(self):
        settings = _load({**BASE_ENV, "EMAIL": "bot@example.com"})
        self.assertEqual(settings.email_from, "bot@example.com")

        settings = _load({**BASE_ENV, "EMAIL": "bot@example.com", "EMAIL_FROM": "hi@example.com"})
        self.assertEqual(settings.email_from, "hi@example.com")

    def test_website_url_trailing_slash_stripped(self):
        settings = _load({**BASE_ENV, "WEBSITE_URL": "https://urbansquare.example.com/"})
        self.assertEqual(settings.website_url, "https://urbansquare.example.com")

    def test_malformed_port_refused(self):
        with self.assertRaises(ValueError):
            _load({**BASE_ENV, "SMTP_PORT": "not-a-port"})

    def test_optional_features_enabled_by_env(self):
        settings = _load({
            **BASE_ENV,
            "OPENAI_API_KEY": "sk-test",
            "ADMIN_EMAIL": "admin@example.com",
            "ADMIN_PASSWORD": "hunter22",
        })
        self.assertTrue(settings.llm_enabled)
        self.assertTrue(settings.admin_configured)


if __name__ == '__main__':
    unittest.main()
