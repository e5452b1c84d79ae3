from .spin_request import SpinRequest
from .spin_response import SpinResponse
from .bet_request import BetRequest, parse_bet
from .bet_response import BetResponse
from .session_response import SessionResponse

__all__ = [
    'SpinRequest',
    'SpinResponse',
    'BetRequest',
    'BetResponse',
    'SessionResponse',
    'parse_bet'
]
