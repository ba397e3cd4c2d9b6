"""Notification sink port."""

from typing import Protocol


class NotificationSink(Protocol):
    """Receives one-line confirmations after successful mutations."""

    def success(self, message: str) -> None: ...
