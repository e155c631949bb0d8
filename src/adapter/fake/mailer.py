"""In-memory implementation of MailerPort for testing."""

from domain.model.email import OutgoingEmail
from port.mailer import MailDeliveryError


class FakeMailer:
    """Records sent messages; can be switched off or told to fail."""

    def __init__(self, enabled: bool = True, fail: bool = False):
        self.enabled = enabled
        self.fail = fail
        self.sent: list[OutgoingEmail] = []

    def send(self, message: OutgoingEmail) -> None:
        if self.fail:
            raise MailDeliveryError("SMTP connection refused")
        self.sent.append(message)
