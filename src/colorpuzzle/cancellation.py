from __future__ import annotations
import threading
import time
from typing import Optional, Protocol

from colorpuzzle.errors import Cancelled


class Token(Protocol):
    @property
    def cancelled(self) -> bool:
        ...


class CancelToken:
    """Cooperative cancellation flag, safe to set from another thread."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class DeadlineToken(CancelToken):
    """Cancels itself once `seconds` have elapsed since construction."""

    def __init__(self, seconds: float):
        super().__init__()
        self.deadline = time.monotonic() + seconds

    @property
    def cancelled(self) -> bool:
        return super().cancelled or time.monotonic() >= self.deadline


def check_cancelled(token: Optional[Token], where: str = "") -> None:
    if token is not None and token.cancelled:
        raise Cancelled(f"cancelled{' during ' + where if where else ''}")
