from dataclasses import dataclass


@dataclass(frozen=True)
class OutgoingEmail:
    """A rendered email ready for delivery."""
    to: str
    subject: str
    html: str
