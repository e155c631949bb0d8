"""Mailer port: outbound interface for transactional email."""

from typing import Protocol

from domain.model.email import OutgoingEmail


class MailDeliveryError(Exception):
    """The mail transport refused or failed to deliver a message."""


class MailerPort(Protocol):
    """Port for sending email.

    ``enabled`` is False for the disabled variant; callers check it instead
    of testing for a missing client.
    """

    enabled: bool

    def send(self, message: OutgoingEmail) -> None: ...
