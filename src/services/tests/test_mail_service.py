"""Unit tests for mail_service.deliver and its delivery policies."""

import unittest

from adapter.external.smtp_mailer import DisabledMailer
from adapter.fake.mailer import FakeMailer
from domain.model.email import OutgoingEmail
from domain.model.errors import DependencyError
from services.mail_service import DeliveryOutcome, DeliveryPolicy, deliver

MESSAGE = OutgoingEmail(to="asha@example.com", subject="Hello", html="<p>Hi</p>")


class TestDeliver(unittest.TestCase):

    def test_enabled_mailer_sends(self):
        mailer = FakeMailer()
        for policy in DeliveryPolicy:
            with self.subTest(policy=policy):
                self.assertEqual(deliver(mailer, MESSAGE, policy), DeliveryOutcome.SENT)
        self.assertEqual(mailer.sent, [MESSAGE, MESSAGE])

    def test_disabled_mailer_skips_under_any_policy(self):
        for policy in DeliveryPolicy:
            with self.subTest(policy=policy):
                self.assertEqual(deliver(DisabledMailer(), MESSAGE, policy), DeliveryOutcome.SKIPPED)

    def test_best_effort_swallows_failure(self):
        outcome = deliver(FakeMailer(fail=True), MESSAGE, DeliveryPolicy.BEST_EFFORT)
        self.assertEqual(outcome, DeliveryOutcome.FAILED)

    def test_required_raises_on_failure(self):
        with self.assertRaises(DependencyError) as ctx:
            deliver(FakeMailer(fail=True), MESSAGE, DeliveryPolicy.REQUIRED)
        self.assertEqual(str(ctx.exception), "Failed to send email")

    def test_failure_is_logged(self):
        with self.assertLogs("services.mail_service", level="ERROR") as logs:
            deliver(FakeMailer(fail=True), MESSAGE, DeliveryPolicy.BEST_EFFORT)
        self.assertIn("Mail send error", logs.output[0])


if __name__ == '__main__':
    unittest.main()
