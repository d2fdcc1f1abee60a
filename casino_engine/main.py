"""
Casino Engine - Clean Architecture Entry Point

Configuration comes from environment variables, see config/settings.py.
"""
import logging

import sentry_sdk
from tornado import web, ioloop
from sentry_sdk.integrations.tornado import TornadoIntegration

from casino_engine.config.container import Container
from casino_engine.config.settings import Settings
from casino_engine.presentation.http.handlers import (
    RegisterHandler,
    LoginHandler,
    LogoutHandler,
    CurrentUserHandler,
    CategoriesHandler,
    GamesHandler,
    FeaturedGamesHandler,
    GamesByCategoryHandler,
    AchievementsHandler,
    HistoryHandler,
    PlayHandler,
    HealthHandler,
    MetricsHandler
)
from casino_engine.presentation.http.request_log import log_api_request

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> None:
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        integrations=[TornadoIntegration()],
        traces_sample_rate=settings.sentry_traces_rate,
        environment=settings.sentry_environment,
        profiles_sample_rate=settings.sentry_profiles_rate,
        debug=settings.sentry_debug,
        release=f"casino-engine@{settings.version}",
        auto_session_tracking=True
    )


def make_app(container: Container) -> web.Application:
    """Create Tornado application with Clean Architecture handlers"""
    deps = container.session_dependencies()

    routes = [
        (r"/health", HealthHandler),
        (r"/metrics", MetricsHandler),

        (r"/api/auth/register", RegisterHandler, dict(deps, register_use_case=container.register_use_case)),
        (r"/api/auth/login", LoginHandler, dict(deps, authenticate_use_case=container.authenticate_use_case)),
        (r"/api/auth/logout", LogoutHandler, deps),
        (r"/api/auth/user", CurrentUserHandler, deps),

        (r"/api/categories", CategoriesHandler, dict(deps, catalog_use_case=container.catalog_use_case)),
        (r"/api/games", GamesHandler, dict(deps, catalog_use_case=container.catalog_use_case)),
        (r"/api/games/featured", FeaturedGamesHandler, dict(deps, catalog_use_case=container.catalog_use_case)),
        (r"/api/games/category/([^/]+)", GamesByCategoryHandler,
         dict(deps, catalog_use_case=container.catalog_use_case)),

        (r"/api/achievements", AchievementsHandler, dict(deps, records_use_case=container.records_use_case)),
        (r"/api/history", HistoryHandler, dict(deps, records_use_case=container.records_use_case)),

        (r"/api/play/([^/]+)", PlayHandler, dict(deps, play_use_case=container.play_use_case)),
    ]

    return web.Application(
        routes,
        cookie_secret=container.settings.session_secret,
        session_max_age_days=container.settings.session_max_age_days,
        log_function=log_api_request
    )


def main():
    logging.basicConfig(level=logging.INFO)

    container = Container.get_instance()
    settings = container.settings
    init_sentry(settings)

    app = make_app(container)
    app.listen(settings.port, address="0.0.0.0")

    purge_interval_ms = settings.session_purge_interval_hours * 3600 * 1000
    ioloop.PeriodicCallback(container.session_store.purge_expired, purge_interval_ms).start()

    logger.info(f"Casino engine started on :{settings.port}")
    ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
