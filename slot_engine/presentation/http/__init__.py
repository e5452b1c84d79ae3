from .handlers import (
    BetHandler,
    HealthHandler,
    MetricsHandler,
    PaytableHandler,
    SessionHandler,
    SessionsHandler,
    SpinHandler
)

__all__ = [
    'BetHandler',
    'HealthHandler',
    'MetricsHandler',
    'PaytableHandler',
    'SessionHandler',
    'SessionsHandler',
    'SpinHandler'
]
