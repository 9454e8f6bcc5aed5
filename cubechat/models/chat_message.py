"""Message model representing one entry in a conversation's history."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLES = (ROLE_USER, ROLE_ASSISTANT)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """A role-tagged message. Insertion order is conversational order."""

    role: str = ROLE_USER
    content: str = ""
    timestamp: datetime = field(default_factory=_utcnow, compare=False)

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")
