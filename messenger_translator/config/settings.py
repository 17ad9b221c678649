"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Messenger Platform Configuration
    ACCESS_TOKEN: Optional[str] = os.getenv("ACCESS_TOKEN")
    VALIDATION_TOKEN: Optional[str] = os.getenv("VALIDATION_TOKEN")
    APP_SECRET: Optional[str] = os.getenv("APP_SECRET")
    GRAPH_API_URL: str = os.getenv("GRAPH_API_URL", "https://graph.facebook.com")
    GRAPH_API_VERSION: str = os.getenv("GRAPH_API_VERSION", "v18.0")
    SIGNATURE_HEADER: str = os.getenv("SIGNATURE_HEADER", "X-Hub-Signature")

    # User preference store
    USER_STORAGE_TYPE: str = os.getenv("USER_STORAGE_TYPE", "restdb")
    DB_ENDPOINT: Optional[str] = os.getenv("DB_ENDPOINT")
    DB_API_KEY: Optional[str] = os.getenv("DB_API_KEY")
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en")
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")

    # Translation backend (Google Cloud Translation v2 REST)
    TRANSLATOR_API_URL: str = os.getenv(
        "TRANSLATOR_API_URL", "https://translation.googleapis.com/language/translate/v2"
    )
    TRANSLATOR_API_KEY: Optional[str] = os.getenv("TRANSLATOR_API_KEY")
    LANGUAGES_CACHE_TTL: int = int(os.getenv("LANGUAGES_CACHE_TTL", "86400"))  # 1 day default

    # Outbound HTTP
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))

    # Redis Configuration
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Celery Configuration
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/1")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")
    EVENT_DISPATCH_MODE: str = os.getenv("EVENT_DISPATCH_MODE", "celery")

    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"
    LOG_DIR: Optional[str] = os.getenv("LOG_DIR")

    # Application
    PORT: int = int(os.getenv("PORT", "8080"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        required_vars = [
            ("ACCESS_TOKEN", cls.ACCESS_TOKEN),
            ("VALIDATION_TOKEN", cls.VALIDATION_TOKEN),
            ("APP_SECRET", cls.APP_SECRET),
        ]

        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    ACCESS_TOKEN = "test-access-token"
    VALIDATION_TOKEN = "test-validation-token"
    APP_SECRET = "test-app-secret"
    DB_ENDPOINT = "https://db.example.test/rest/preferences"
    DB_API_KEY = "test-db-key"
    TRANSLATOR_API_KEY = "test-translator-key"
    REDIS_URL = "redis://localhost:6379/15"  # Use different DB for tests
    EVENT_DISPATCH_MODE = "sync"
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    SENTRY_DSN = None
    LOG_DIR = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
