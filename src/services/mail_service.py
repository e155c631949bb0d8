"""Mail delivery with an explicit per-call failure policy.

Registration sends its welcome email BEST_EFFORT (failures are logged and
ignored); the password-reset request uses REQUIRED (failures propagate as
DependencyError). A disabled mailer skips the send and counts as success
under either policy.
"""

import logging
from enum import Enum

from domain.model.email import OutgoingEmail
from domain.model.errors import DependencyError
from port.mailer import MailDeliveryError, MailerPort

logger = logging.getLogger(__name__)


class DeliveryPolicy(str, Enum):
    BEST_EFFORT = "best_effort"
    REQUIRED = "required"


class DeliveryOutcome(str, Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


def deliver(mailer: MailerPort, message: OutgoingEmail, policy: DeliveryPolicy) -> DeliveryOutcome:
    """Send ``message`` and apply ``policy`` to a failure.

    Raises:
        DependencyError: the send failed and policy is REQUIRED
    """
    if not mailer.enabled:
        logger.info("Email service disabled, skipping email", extra={
            "to": message.to, "subject": message.subject,
        })
        return DeliveryOutcome.SKIPPED

    try:
        mailer.send(message)
    except MailDeliveryError as e:
        logger.error("Mail send error", extra={
            "to": message.to, "subject": message.subject,
            "policy": policy.value, "error": str(e),
        })
        if policy is DeliveryPolicy.REQUIRED:
            raise DependencyError("Failed to send email") from e
        return DeliveryOutcome.FAILED

    logger.info("Email sent", extra={"to": message.to, "subject": message.subject})
    return DeliveryOutcome.SENT
