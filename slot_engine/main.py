"""
Slot Engine - Clean Architecture Entry Point

Serves the slot machine over HTTP REST. Configuration comes from the
environment (see slot_engine.config.container for game settings):
- PORT (default 8082)
- SENTRY_DSN, SENTRY_ENVIRONMENT, SENTRY_TRACES_SAMPLE_RATE,
  SENTRY_PROFILES_SAMPLE_RATE, SENTRY_DEBUG
"""
import os
import logging

import sentry_sdk
from tornado import web, ioloop
from sentry_sdk.integrations.tornado import TornadoIntegration

from slot_engine import __version__
from slot_engine.config.container import Container
from slot_engine.presentation.http.handlers import (
    BetHandler,
    HealthHandler,
    MetricsHandler,
    PaytableHandler,
    SessionHandler,
    SessionsHandler,
    SpinHandler
)

logger = logging.getLogger(__name__)

SESSION_ID = r"([^/]+)"


def init_sentry():
    """Initialize Sentry; every call is a no-op when SENTRY_DSN is unset"""
    version = os.environ.get('APP_VERSION', __version__)
    sentry_sdk.init(
        dsn=os.environ.get('SENTRY_DSN'),
        integrations=[TornadoIntegration()],
        traces_sample_rate=float(os.environ.get('SENTRY_TRACES_SAMPLE_RATE', '1.0')),
        environment=os.environ.get('SENTRY_ENVIRONMENT', 'development'),
        profiles_sample_rate=float(os.environ.get('SENTRY_PROFILES_SAMPLE_RATE', '0')),
        debug=os.environ.get('SENTRY_DEBUG', 'false').lower() == 'true',
        release=f"slot-engine@{version}",
    )


def make_app(container: Container = None):
    """Create Tornado application with Clean Architecture handlers"""
    container = container or Container.get_instance()
    controller = container.get_controller()

    routes = [
        (r"/health", HealthHandler),
        (r"/metrics", MetricsHandler),
        (r"/paytable", PaytableHandler, {
            "paytable": container.paytable,
            "reel_count": container.reel_count
        }),
        (r"/sessions", SessionsHandler, {
            "open_session_use_case": container.open_session_use_case
        }),
        (rf"/sessions/{SESSION_ID}", SessionHandler, {
            "get_session_use_case": container.get_session_use_case,
            "close_session_use_case": container.close_session_use_case
        }),
        (rf"/sessions/{SESSION_ID}/bet", BetHandler, {"controller": controller}),
        (rf"/sessions/{SESSION_ID}/spin", SpinHandler, {"controller": controller}),
    ]

    return web.Application(routes)


def main():
    logging.basicConfig(level=logging.INFO)
    init_sentry()

    container = Container.get_instance()
    app = make_app(container)
    port = int(os.environ.get('PORT', 8082))
    app.listen(port)

    logger.info(
        f"Slot Engine started on :{port} "
        f"(reels={container.reel_count}, credits={container.initial_credits}, "
        f"rng={container.rng_backend})"
    )
    print(f"Slot Engine started on :{port}")
    print("Routes:")
    print("  GET  /paytable")
    print("  POST /sessions, GET|DELETE /sessions/<id>")
    print("  POST /sessions/<id>/bet, POST /sessions/<id>/spin")

    ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
