from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..cancellation import CancellationToken


class PermitGatePort(Protocol):
    def acquire(self, cancel_token: Optional["CancellationToken"] = None) -> None:
        """Block until a permit is available, then consume it."""

    def replenish(self) -> None:
        """Restore the full capacity and wake blocked acquirers."""
