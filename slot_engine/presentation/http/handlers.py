"""HTTP REST handlers for the slot engine"""
import json
import logging
import sentry_sdk
from tornado import web
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from slot_engine.domain.entities.paytable import Paytable
from slot_engine.application.ports.session_repository_port import SessionNotFoundError
from slot_engine.application.use_cases.open_session_use_case import (
    CloseSessionUseCase,
    GetSessionUseCase,
    OpenSessionUseCase
)
from slot_engine.presentation.controller import SlotMachineController, SpinInProgressError
from slot_engine.presentation.view import render_outcome

logger = logging.getLogger(__name__)


class JsonHandler(web.RequestHandler):
    """Base handler with JSON body parsing and error responses"""

    def load_json(self) -> dict:
        if not self.request.body:
            return {}
        data = json.loads(self.request.body)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data

    def write_error_json(self, status: int, message: str):
        self.set_status(status)
        self.write({"error": message})

    def handle_exception(self, e: Exception):
        """Map an exception raised while serving to a JSON error response"""
        if isinstance(e, SessionNotFoundError):
            self.write_error_json(404, str(e))
        elif isinstance(e, SpinInProgressError):
            self.write_error_json(409, str(e))
        elif isinstance(e, ValueError):
            # json.JSONDecodeError is a ValueError
            self.write_error_json(400, str(e))
        else:
            logger.error(f"Unhandled error on {self.request.path}: {e}")
            sentry_sdk.capture_exception(e)
            self.write_error_json(500, str(e))


class HealthHandler(web.RequestHandler):
    """Health check endpoint"""

    def get(self):
        self.write({"status": "ok"})


class MetricsHandler(web.RequestHandler):
    """Prometheus metrics endpoint"""

    def get(self):
        self.set_header('Content-Type', CONTENT_TYPE_LATEST)
        self.write(generate_latest())


class PaytableHandler(web.RequestHandler):
    """Symbols, multipliers and theoretical return"""

    def initialize(self, paytable: Paytable, reel_count: int):
        self.paytable = paytable
        self.reel_count = reel_count

    def get(self):
        result = self.paytable.to_dict()
        result["reel_count"] = self.reel_count
        result["return_to_player"] = self.paytable.return_to_player(self.reel_count)
        self.write(result)


class SessionsHandler(JsonHandler):
    """POST /sessions - open a session"""

    def initialize(self, open_session_use_case: OpenSessionUseCase):
        self.open_session_use_case = open_session_use_case

    def post(self):
        try:
            session = self.open_session_use_case.execute()
            result = session.to_dict()
            result["view"] = render_outcome(None, 0, session.credits)
            self.set_status(201)
            self.write(result)
        except Exception as e:
            self.handle_exception(e)


class SessionHandler(JsonHandler):
    """GET/DELETE /sessions/{id}"""

    def initialize(
        self,
        get_session_use_case: GetSessionUseCase,
        close_session_use_case: CloseSessionUseCase
    ):
        self.get_session_use_case = get_session_use_case
        self.close_session_use_case = close_session_use_case

    def get(self, session_id):
        try:
            session = self.get_session_use_case.execute(session_id)
            self.write(session.to_dict())
        except Exception as e:
            self.handle_exception(e)

    def delete(self, session_id):
        try:
            self.close_session_use_case.execute(session_id)
            self.set_status(204)
        except Exception as e:
            self.handle_exception(e)


class BetHandler(JsonHandler):
    """POST /sessions/{id}/bet - step the bet up or down"""

    def initialize(self, controller: SlotMachineController):
        self.controller = controller

    def post(self, session_id):
        try:
            data = self.load_json()
            adjustment = data.get('adjustment')
            if type(adjustment) is not int or adjustment not in (1, -1):
                raise ValueError("'adjustment' must be 1 or -1")

            result = self.controller.modify_bet(session_id, data.get('bet'), adjustment)
            self.write(result.to_dict())
        except Exception as e:
            self.handle_exception(e)


class SpinHandler(JsonHandler):
    """POST /sessions/{id}/spin - spin the reels"""

    def initialize(self, controller: SlotMachineController):
        self.controller = controller

    async def post(self, session_id):
        # Continue trace from upstream
        transaction = sentry_sdk.continue_trace({
            "sentry-trace": self.request.headers.get("sentry-trace"),
            "baggage": self.request.headers.get("baggage")
        }, op="game.spin", name="spin_reels")

        with sentry_sdk.start_transaction(transaction):
            try:
                sentry_sdk.set_user({"id": session_id})
                result = await self.controller.handle_spin(session_id)

                if result.error:
                    self.write_error_json(500, result.error)
                else:
                    response = result.to_dict()
                    response["view"] = render_outcome(
                        result.symbols if result.spun else None,
                        result.amount_won,
                        result.credits_after
                    )
                    self.write(response)
            except Exception as e:
                self.handle_exception(e)
