"""Bounded auth retry tracking for authenticated requests. Sync, unit-testable."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class RetryStage(str, Enum):
    INITIAL = "initial"
    REFRESH_ATTEMPTED = "refresh_attempted"
    RELOGIN_ATTEMPTED = "relogin_attempted"


# Each stage may be left once, and only forward.
_TRANSITIONS: dict[RetryStage, RetryStage | None] = {
    RetryStage.INITIAL: RetryStage.REFRESH_ATTEMPTED,
    RetryStage.REFRESH_ATTEMPTED: RetryStage.RELOGIN_ATTEMPTED,
    RetryStage.RELOGIN_ATTEMPTED: None,
}


class AuthRetryState:
    """
    Tracks how far one authenticated request has escalated.

    Used by SessionManager.authenticated_request:
    - INITIAL: first attempt; a 401 may trigger one token refresh
    - REFRESH_ATTEMPTED: refresh ran; a failed refresh may trigger one re-login
    - RELOGIN_ATTEMPTED: terminal; every further 401 propagates
    """

    def __init__(self) -> None:
        self._stage = RetryStage.INITIAL

    @property
    def stage(self) -> RetryStage:
        return self._stage

    @property
    def can_refresh(self) -> bool:
        return self._stage is RetryStage.INITIAL

    @property
    def can_relogin(self) -> bool:
        return self._stage is RetryStage.REFRESH_ATTEMPTED

    def advance(self, to: RetryStage) -> None:
        """
        Move to the next stage.

        Raises:
            RuntimeError: If the transition skips or repeats a stage
        """
        expected = _TRANSITIONS[self._stage]
        if to is not expected:
            raise RuntimeError(
                f"Invalid auth retry transition {self._stage.value} -> {to.value}"
            )
        logger.debug(f"Auth retry stage {self._stage.value} -> {to.value}")
        self._stage = to
