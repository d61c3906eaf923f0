"""User-facing notifications and the in-memory inbox they are delivered to."""

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Protocol

from oneway.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    VOTE = "vote"
    ELIMINATION = "elimination"
    ADVANCE = "advance"
    WINNER = "winner"
    SYSTEM = "system"


@dataclass(frozen=True)
class Notification:
    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: datetime
    read: bool = False
    data: dict[str, Any] = field(default_factory=dict)


class NotificationSink(Protocol):
    def push(self, type: NotificationType, title: str, message: str,
             data: dict[str, Any] | None = None) -> Notification:
        ...


class NotificationCenter:
    """A user's inbox, newest notification first."""

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self._notifications: list[Notification] = []

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return tuple(self._notifications)

    def push(self, type: NotificationType, title: str, message: str,
             data: dict[str, Any] | None = None) -> Notification:
        notification = Notification(
            id=uuid.uuid4().hex,
            type=NotificationType(type),
            title=title,
            message=message,
            timestamp=self.clock.now(),
            data=dict(data or {}),
        )
        self._notifications.insert(0, notification)
        logger.debug("Notification %s: %s", notification.type.value, title)
        return notification

    def mark_read(self, notification_id: str) -> None:
        """Mark one notification read. Unknown ids are ignored."""
        self._notifications = [
            replace(n, read=True) if n.id == notification_id else n
            for n in self._notifications
        ]

    def mark_all_read(self) -> None:
        self._notifications = [replace(n, read=True) for n in self._notifications]

    def unread_count(self) -> int:
        return sum(1 for n in self._notifications if not n.read)


def vote_recorded_message(artist_name: str | None, remaining: int) -> tuple[str, str]:
    """Title and message shown after a successful vote."""
    return (
        "Vote Recorded!",
        f"Your vote for {artist_name or 'artist'} has been counted. "
        f"{remaining} votes remaining today.",
    )


# Title per transaction type, and the title used when the amount went on credit
TRANSACTION_TITLES = {
    "deposit": "Funds Added",
    "send": "Money Sent!",
    "receive": "Money Received",
    "request": "Request Sent!",
    "purchase": "Purchase Complete!",
    "sale": "Sale Complete",
    "demo": "Demo Booked!",
    "tour": "Tour Booked!",
    "sponsor": "Sponsorship Complete!",
    "payout": "Payout Initiated!",
    "repayment": "Credit Repaid",
    "adjustment": "Balance Adjusted",
}
CREDIT_TITLES = {
    "demo": "Demo Booked on Credit!",
    "tour": "Tour Booked on Credit!",
}


def transaction_message(tx) -> tuple[str, str]:
    """Title and message shown after a wallet transaction is recorded.

    Takes any object shaped like a wallet ``Transaction``.
    """
    tx_type = tx.type.value
    on_credit = tx.credit_delta > 0
    title = TRANSACTION_TITLES.get(tx_type, "Wallet Updated")
    if on_credit:
        title = CREDIT_TITLES.get(tx_type, title)
    message = f"{tx.description}: ${abs(tx.amount):.2f}"
    if tx.fee:
        message += f" (fee ${tx.fee:.2f}, net ${tx.net_amount:.2f})"
    if on_credit:
        message += ". Your account is frozen until the credit is repaid."
    return title, message
