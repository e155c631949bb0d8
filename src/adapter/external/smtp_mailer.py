"""SMTP mailer adapters: the enabled and disabled variants of MailerPort."""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from domain.model.email import OutgoingEmail
from port.mailer import MailDeliveryError

logger = logging.getLogger(__name__)


class SmtpMailer:
    """Sends email through an authenticated STARTTLS SMTP server."""

    enabled = True

    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        from_email: str,
        from_name: str = "UrbanSquare",
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.timeout = timeout

    def _build_message(self, message: OutgoingEmail) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = f"{self.from_name} <{self.from_email}>"
        msg["To"] = message.to
        msg.attach(MIMEText(message.html, "html", "utf-8"))
        return msg

    def send(self, message: OutgoingEmail) -> None:
        """Deliver one message.

        Raises:
            MailDeliveryError: connection, authentication or send failed.
        """
        msg = self._build_message(message)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(str(e)) from e

        logger.debug("SMTP message accepted", extra={"to": message.to, "subject": message.subject})


class DisabledMailer:
    """Stand-in used when ENABLE_EMAIL is off. Never sends anything."""

    enabled = False

    def send(self, message: OutgoingEmail) -> None:
        raise MailDeliveryError("Email service is disabled")
