# core/confirmation.py

"""
Two-step confirmation for destructive actions.

Deleting a student, a medical record, or an academic result is never executed directly. The UI
first requests confirmation with a message and the action to run; the action only runs if the
user confirms. The gate moves through the states:

    IDLE -> PENDING -> (COMMITTED | CANCELLED) -> IDLE

`COMMITTED` and `CANCELLED` are reported as the outcome of the finished step and the gate is
immediately ready for the next request.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any


class ConfirmationStatus(Enum):
    IDLE = "IDLE"
    PENDING = "PENDING"
    COMMITTED = "COMMITTED"
    CANCELLED = "CANCELLED"


class PendingAction:

    def __init__(self, message: str, on_confirm: Callable[[], Any]):
        self._message = message
        self._on_confirm = on_confirm

    @property
    def message(self) -> str:
        return self._message

    def run(self) -> Any:
        return self._on_confirm()

    def __repr__(self) -> str:
        return f"PendingAction({self._message!r})"


class ConfirmationGate:

    def __init__(self):
        self._pending: PendingAction | None = None
        self._last_outcome: ConfirmationStatus | None = None

    # === properties ===

    @property
    def status(self) -> ConfirmationStatus:
        return ConfirmationStatus.PENDING if self._pending else ConfirmationStatus.IDLE

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def message(self) -> str | None:
        return self._pending.message if self._pending else None

    @property
    def last_outcome(self) -> ConfirmationStatus | None:
        return self._last_outcome

    # === transitions ===

    def request(self, message: str, on_confirm: Callable[[], Any]) -> None:
        """
        Enter the pending state with a message and the action to run on confirmation.

        Notes:
            - A request made while another is pending replaces it; only the latest action can run.
        """
        self._pending = PendingAction(message, on_confirm)

    def confirm(self) -> Any:
        """
        Run the pending action and return to idle.

        Returns:
            Whatever the pending action returns (typically a `Response`).

        Raises:
            RuntimeError: If nothing is pending.

        Notes:
            - The gate returns to idle even if the action raises.
        """
        pending = self._require_pending()
        self._pending = None

        try:
            return pending.run()
        finally:
            self._last_outcome = ConfirmationStatus.COMMITTED

    def cancel(self) -> None:
        """
        Discard the pending action without running it.

        Raises:
            RuntimeError: If nothing is pending.
        """
        self._require_pending()
        self._pending = None
        self._last_outcome = ConfirmationStatus.CANCELLED

    def _require_pending(self) -> PendingAction:
        if self._pending is None:
            raise RuntimeError("There is no action awaiting confirmation.")
        return self._pending
