"""Tests for the SMTP mailer variants."""

import smtplib
import unittest
from unittest.mock import MagicMock, patch

from adapter.external.smtp_mailer import DisabledMailer, SmtpMailer
from domain.model.email import OutgoingEmail
from port.mailer import MailDeliveryError

MESSAGE = OutgoingEmail(to="asha@example.com", subject="Welcome", html="<p>Hi Asha</p>")


class TestSmtpMailer(unittest.TestCase):

    def setUp(self):
        self.mailer = SmtpMailer(
            host="smtp.example.com",
            port=587,
            username="bot@example.com",
            password="app-password",
            from_email="bot@example.com",
        )

    @patch('adapter.external.smtp_mailer.smtplib.SMTP')
    def test_send_uses_starttls_and_login(self, mock_smtp):
        server = MagicMock()
        mock_smtp.return_value.__enter__.return_value = server

        self.mailer.send(MESSAGE)

        mock_smtp.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("bot@example.com", "app-password")
        sent = server.send_message.call_args[0][0]
        self.assertEqual(sent["To"], "asha@example.com")
        self.assertEqual(sent["Subject"], "Welcome")
        self.assertEqual(sent["From"], "UrbanSquare <bot@example.com>")

    @patch('adapter.external.smtp_mailer.smtplib.SMTP')
    def test_smtp_error_becomes_delivery_error(self, mock_smtp):
        server = MagicMock()
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
        mock_smtp.return_value.__enter__.return_value = server

        with self.assertRaises(MailDeliveryError):
            self.mailer.send(MESSAGE)

    @patch('adapter.external.smtp_mailer.smtplib.SMTP')
    def test_connection_error_becomes_delivery_error(self, mock_smtp):
        mock_smtp.side_effect = ConnectionRefusedError("refused")
        with self.assertRaises(MailDeliveryError):
            self.mailer.send(MESSAGE)

    def test_enabled_flag(self):
        self.assertTrue(self.mailer.enabled)


class TestDisabledMailer(unittest.TestCase):

    def test_disabled_flag_and_refuses_to_send(self):
        mailer = DisabledMailer()
        self.assertFalse(mailer.enabled)
        with self.assertRaises(MailDeliveryError):
            mailer.send(MESSAGE)


if __name__ == '__main__':
    unittest.main()
