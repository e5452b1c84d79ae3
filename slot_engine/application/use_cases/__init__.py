from .open_session_use_case import OpenSessionUseCase, GetSessionUseCase, CloseSessionUseCase
from .play_spin_use_case import PlaySpinUseCase
from .adjust_bet_use_case import AdjustBetUseCase

__all__ = [
    'OpenSessionUseCase',
    'GetSessionUseCase',
    'CloseSessionUseCase',
    'PlaySpinUseCase',
    'AdjustBetUseCase'
]
