"""Service configuration read from environment variables"""
import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == 'true'


@dataclass
class Settings:
    """Runtime settings for the casino engine"""

    port: int = 5000
    version: str = '1.0.0'
    session_secret: str = 'casino-secret-key'
    session_max_age_days: float = 7
    session_purge_interval_hours: float = 24
    default_coins: int = 1000
    seed_catalog: bool = True

    sentry_dsn: Optional[str] = None
    sentry_environment: str = 'development'
    sentry_traces_rate: float = 1.0
    sentry_profiles_rate: float = 0.0
    sentry_debug: bool = False

    @property
    def session_max_age(self) -> float:
        """Session lifetime in seconds"""
        return self.session_max_age_days * 24 * 3600

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            port=int(os.environ.get('PORT', 5000)),
            version=os.environ.get('APP_VERSION', '1.0.0'),
            session_secret=os.environ.get('SESSION_SECRET', 'casino-secret-key'),
            session_max_age_days=float(os.environ.get('SESSION_MAX_AGE_DAYS', '7')),
            session_purge_interval_hours=float(os.environ.get('SESSION_PURGE_INTERVAL_HOURS', '24')),
            default_coins=int(os.environ.get('DEFAULT_COINS', '1000')),
            seed_catalog=_env_flag('SEED_CATALOG', 'true'),
            sentry_dsn=os.environ.get('SENTRY_DSN'),
            sentry_environment=os.environ.get('SENTRY_ENVIRONMENT', 'development'),
            sentry_traces_rate=float(os.environ.get('SENTRY_TRACES_SAMPLE_RATE', '1.0')),
            sentry_profiles_rate=float(os.environ.get('SENTRY_PROFILES_SAMPLE_RATE', '0')),
            sentry_debug=_env_flag('SENTRY_DEBUG', 'false')
        )
