"""Dependency Injection Container"""
import os
from typing import Optional

from slot_engine.domain.entities.paytable import Paytable
from slot_engine.infrastructure.persistence.in_memory_session_repository import InMemorySessionRepository
from slot_engine.infrastructure.rng import make_random_source_factory
from slot_engine.application.use_cases.open_session_use_case import (
    CloseSessionUseCase,
    GetSessionUseCase,
    OpenSessionUseCase
)
from slot_engine.application.use_cases.play_spin_use_case import PlaySpinUseCase
from slot_engine.application.use_cases.adjust_bet_use_case import AdjustBetUseCase
from slot_engine.presentation.controller import SlotMachineController


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


class Container:
    """Simple DI Container for the slot engine.

    Keyword arguments override the matching environment variables.
    """

    _instance = None

    def __init__(
        self,
        reel_count: Optional[int] = None,
        initial_credits: Optional[int] = None,
        opening_bet: Optional[int] = None,
        spin_delay: Optional[float] = None,
        rng_backend: Optional[str] = None,
        rng_seed: Optional[int] = None
    ):
        self.reel_count = reel_count if reel_count is not None else _env_int('REEL_COUNT', 3)
        self.initial_credits = (
            initial_credits if initial_credits is not None else _env_int('INITIAL_CREDITS', 100)
        )
        self.opening_bet = opening_bet if opening_bet is not None else _env_int('DEFAULT_BET', 1)
        self.spin_delay = (
            spin_delay if spin_delay is not None
            else float(os.environ.get('SPIN_DELAY_SECONDS', '1.0'))
        )
        self.rng_backend = rng_backend or os.environ.get('RNG_BACKEND', 'python')
        if rng_seed is None and os.environ.get('RNG_SEED'):
            rng_seed = int(os.environ['RNG_SEED'])
        self.rng_seed = rng_seed

        self._initialize()

    def _initialize(self):
        """Initialize all dependencies"""
        self.paytable = Paytable.classic()
        self.random_source_factory = make_random_source_factory(self.rng_backend, self.rng_seed)

        # Repositories
        self.session_repository = InMemorySessionRepository()

        # Use cases
        self.open_session_use_case = OpenSessionUseCase(
            session_repository=self.session_repository,
            paytable=self.paytable,
            random_source_factory=self.random_source_factory,
            reel_count=self.reel_count,
            initial_credits=self.initial_credits,
            opening_bet=self.opening_bet
        )
        self.get_session_use_case = GetSessionUseCase(self.session_repository)
        self.close_session_use_case = CloseSessionUseCase(self.session_repository)
        self.play_spin_use_case = PlaySpinUseCase(self.session_repository)
        self.adjust_bet_use_case = AdjustBetUseCase(self.session_repository)

        self.controller = SlotMachineController(
            get_session_use_case=self.get_session_use_case,
            play_spin_use_case=self.play_spin_use_case,
            adjust_bet_use_case=self.adjust_bet_use_case,
            spin_delay=self.spin_delay
        )

    @classmethod
    def get_instance(cls) -> 'Container':
        """Get the process-wide container configured from the environment"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_controller(self) -> SlotMachineController:
        return self.controller
