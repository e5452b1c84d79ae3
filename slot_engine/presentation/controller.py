"""Slot machine controller: bet input handling and delayed spin resolution"""
import asyncio
import logging
from typing import Set

from slot_engine.application.dto.bet_request import BetRequest, parse_bet
from slot_engine.application.dto.bet_response import BetResponse
from slot_engine.application.dto.spin_request import SpinRequest
from slot_engine.application.dto.spin_response import SpinResponse
from slot_engine.application.use_cases.adjust_bet_use_case import AdjustBetUseCase
from slot_engine.application.use_cases.open_session_use_case import GetSessionUseCase
from slot_engine.application.use_cases.play_spin_use_case import PlaySpinUseCase

logger = logging.getLogger(__name__)

DEFAULT_SPIN_DELAY = 1.0


class SpinInProgressError(RuntimeError):
    """Raised when a session asks for a spin while its reels are still turning"""

    def __init__(self, session_id: str):
        super().__init__(f"Spin already in progress for session {session_id}")
        self.session_id = session_id


class SlotMachineController:
    """Mediates player actions between the HTTP layer and the use cases.

    While a session's spin is resolving its spin control is disabled: a
    second request for the same session is refused until the first one
    has been shown.
    """

    def __init__(
        self,
        get_session_use_case: GetSessionUseCase,
        play_spin_use_case: PlaySpinUseCase,
        adjust_bet_use_case: AdjustBetUseCase,
        spin_delay: float = DEFAULT_SPIN_DELAY
    ):
        self.get_session_use_case = get_session_use_case
        self.play_spin_use_case = play_spin_use_case
        self.adjust_bet_use_case = adjust_bet_use_case
        self.spin_delay = spin_delay
        self._resolving: Set[str] = set()

    def is_resolving(self, session_id: str) -> bool:
        return session_id in self._resolving

    async def handle_spin(self, session_id: str) -> SpinResponse:
        """Disable the session's spin, let the reels turn, then resolve"""
        # Fail fast on unknown sessions instead of after the delay
        self.get_session_use_case.execute(session_id)

        if session_id in self._resolving:
            raise SpinInProgressError(session_id)

        self._resolving.add(session_id)
        try:
            if self.spin_delay > 0:
                await asyncio.sleep(self.spin_delay)
            return self.play_spin_use_case.execute(SpinRequest(session_id=session_id))
        finally:
            self._resolving.discard(session_id)

    def modify_bet(self, session_id: str, bet_text, adjustment: int) -> BetResponse:
        """Step the bet shown to the player; out-of-range steps are ignored.

        ``bet_text`` of None adjusts from the bet already stored.
        """
        base = None if bet_text is None else parse_bet(bet_text)
        return self.adjust_bet_use_case.execute(
            BetRequest(session_id=session_id, adjustment=adjustment, base=base)
        )
