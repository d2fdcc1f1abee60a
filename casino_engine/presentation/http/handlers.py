"""HTTP REST handlers for the casino API"""
import functools
import json
import logging
from typing import Any, Optional

import sentry_sdk
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from tornado import web

from casino_engine.application.dto.credentials_request import CredentialsRequest
from casino_engine.application.dto.play_request import PlayRequest
from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.application.ports.session_store_port import SessionStorePort
from casino_engine.application.use_cases.authenticate_user_use_case import AuthenticateUserUseCase
from casino_engine.application.use_cases.browse_catalog_use_case import BrowseCatalogUseCase
from casino_engine.application.use_cases.play_game_use_case import PlayGameUseCase
from casino_engine.application.use_cases.player_records_use_case import PlayerRecordsUseCase
from casino_engine.application.use_cases.register_user_use_case import RegisterUserUseCase
from casino_engine.domain.entities.user import User
from casino_engine.domain.errors import CasinoError, UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)

SESSION_COOKIE = "casino.sid"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def api_endpoint(method):
    """Convert errors raised by a handler method into {message} responses"""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except CasinoError as e:
            if e.status_code >= 500:
                sentry_sdk.capture_exception(e)
                logger.error(f"{self.request.method} {self.request.path} failed: {e}")
                self.write_json({"message": INTERNAL_ERROR_MESSAGE}, status=500)
            else:
                self.write_json({"message": e.message}, status=e.status_code)
        except Exception as e:
            sentry_sdk.capture_exception(e)
            logger.exception(f"{self.request.method} {self.request.path} failed")
            self.write_json({"message": INTERNAL_ERROR_MESSAGE}, status=500)

    return wrapper


class BaseApiHandler(web.RequestHandler):
    """JSON handler with cookie-backed server-side sessions"""

    def initialize(self, entity_store: EntityStorePort, session_store: SessionStorePort):
        self.entity_store = entity_store
        self.session_store = session_store
        self.response_payload = None

    def get_current_user(self) -> Optional[User]:
        session_id = self.session_id()
        if session_id is None:
            return None
        user_id = self.session_store.get_user_id(session_id)
        if user_id is None:
            return None
        return self.entity_store.get_user(user_id)

    def session_id(self) -> Optional[str]:
        max_age_days = self.settings.get("session_max_age_days", 7)
        value = self.get_signed_cookie(SESSION_COOKIE, max_age_days=max_age_days)
        return value.decode() if value else None

    def require_user(self) -> User:
        user = self.current_user
        if user is None:
            raise UnauthorizedError()
        return user

    def json_body(self) -> dict:
        if not self.request.body:
            return {}
        try:
            data = json.loads(self.request.body)
        except ValueError:
            raise ValidationError("malformed JSON body")
        if not isinstance(data, dict):
            raise ValidationError("JSON body must be an object")
        return data

    def write_json(self, data: Any, status: int = 200) -> None:
        self.response_payload = data
        self.set_status(status)
        self.set_header("Content-Type", "application/json; charset=UTF-8")
        self.finish(json.dumps(data))

    def write_error(self, status_code: int, **kwargs) -> None:
        message = INTERNAL_ERROR_MESSAGE if status_code >= 500 else self._reason
        self.write_json({"message": message}, status=status_code)


class RegisterHandler(BaseApiHandler):

    def initialize(self, register_use_case: RegisterUserUseCase, **kwargs):
        super().initialize(**kwargs)
        self.register_use_case = register_use_case

    @api_endpoint
    def post(self):
        """POST /api/auth/register"""
        request = CredentialsRequest.from_dict(self.json_body())
        user = self.register_use_case.execute(request)
        self.write_json({"id": user.id, "username": user.username}, status=201)


class LoginHandler(BaseApiHandler):

    def initialize(self, authenticate_use_case: AuthenticateUserUseCase, **kwargs):
        super().initialize(**kwargs)
        self.authenticate_use_case = authenticate_use_case

    @api_endpoint
    def post(self):
        """POST /api/auth/login"""
        request = CredentialsRequest.from_dict(self.json_body())
        user = self.authenticate_use_case.execute(request)

        previous = self.session_id()
        if previous:
            self.session_store.destroy(previous)
        session_id = self.session_store.create(user.id)
        self.set_signed_cookie(
            SESSION_COOKIE,
            session_id,
            expires_days=self.settings.get("session_max_age_days", 7),
            httponly=True
        )
        self.write_json(user.snapshot())


class LogoutHandler(BaseApiHandler):

    @api_endpoint
    def post(self):
        """POST /api/auth/logout"""
        session_id = self.session_id()
        if session_id:
            self.session_store.destroy(session_id)
        self.clear_cookie(SESSION_COOKIE)
        self.write_json({"message": "Logged out"})


class CurrentUserHandler(BaseApiHandler):

    @api_endpoint
    def get(self):
        """GET /api/auth/user"""
        self.write_json(self.require_user().snapshot())


class CatalogHandler(BaseApiHandler):
    """Base for the public catalog endpoints"""

    def initialize(self, catalog_use_case: BrowseCatalogUseCase, **kwargs):
        super().initialize(**kwargs)
        self.catalog_use_case = catalog_use_case


class CategoriesHandler(CatalogHandler):

    @api_endpoint
    def get(self):
        self.write_json(self.catalog_use_case.categories())


class GamesHandler(CatalogHandler):

    @api_endpoint
    def get(self):
        self.write_json(self.catalog_use_case.games())


class FeaturedGamesHandler(CatalogHandler):

    @api_endpoint
    def get(self):
        self.write_json(self.catalog_use_case.featured_games())


class GamesByCategoryHandler(CatalogHandler):

    @api_endpoint
    def get(self, category_id):
        self.write_json(self.catalog_use_case.games_by_category(category_id))


class PlayerRecordsHandler(BaseApiHandler):
    """Base for endpoints that only expose the caller's own records"""

    def initialize(self, records_use_case: PlayerRecordsUseCase, **kwargs):
        super().initialize(**kwargs)
        self.records_use_case = records_use_case


class AchievementsHandler(PlayerRecordsHandler):

    @api_endpoint
    def get(self):
        user = self.require_user()
        self.write_json(self.records_use_case.achievements(user.id))


class HistoryHandler(PlayerRecordsHandler):

    @api_endpoint
    def get(self):
        user = self.require_user()
        self.write_json(self.records_use_case.history(user.id))


class PlayHandler(BaseApiHandler):
    """HTTP REST handler for placing a bet"""

    def initialize(self, play_use_case: PlayGameUseCase, **kwargs):
        super().initialize(**kwargs)
        self.play_use_case = play_use_case

    @api_endpoint
    def post(self, game_type):
        """POST /api/play/:gameType"""
        user = self.require_user()
        request = PlayRequest.from_dict(user.id, game_type, self.json_body())
        result = self.play_use_case.execute(request)
        self.write_json(result.to_dict())


class HealthHandler(web.RequestHandler):
    """Health check endpoint"""

    def get(self):
        self.write({"status": "ok"})


class MetricsHandler(web.RequestHandler):
    """Prometheus metrics endpoint"""

    def get(self):
        self.set_header('Content-Type', CONTENT_TYPE_LATEST)
        self.write(generate_latest())
