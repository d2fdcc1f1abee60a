from .handlers import (
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

__all__ = [
    'RegisterHandler',
    'LoginHandler',
    'LogoutHandler',
    'CurrentUserHandler',
    'CategoriesHandler',
    'GamesHandler',
    'FeaturedGamesHandler',
    'GamesByCategoryHandler',
    'AchievementsHandler',
    'HistoryHandler',
    'PlayHandler',
    'HealthHandler',
    'MetricsHandler'
]
