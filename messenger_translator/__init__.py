"""Flask application factory with dependency injection."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from flask import Flask

from messenger_translator.config.settings import get_config
from messenger_translator.infrastructure.service_container import ServiceContainer
from messenger_translator.middleware.error_handler import init_error_handlers
from messenger_translator.middleware.monitoring import register_metrics_middleware
from messenger_translator.middleware.rate_limiter import create_rate_limiter
from messenger_translator.views import webhook_blueprint, health_blueprint, logs_blueprint

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "relay.log"


def create_app(config_class=None, container: ServiceContainer = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    The configuration is validated before anything else: a missing access
    token, validation token or app secret aborts startup.

    Args:
        config_class: Optional configuration class (for testing)
        container: Optional pre-built service container (for testing)

    Returns:
        Configured Flask application

    Raises:
        ValueError: If required configuration is missing
    """
    config = config_class or get_config()
    config.validate()

    _configure_logging(config)
    _logger = logging.getLogger(__name__)

    app = Flask(__name__)
    app.config.from_object(config)

    app.register_blueprint(webhook_blueprint)
    app.register_blueprint(health_blueprint)
    if config.LOG_DIR:
        app.register_blueprint(logs_blueprint)

    app.config["limiter"] = create_rate_limiter(app)
    register_metrics_middleware(app)
    init_error_handlers(app)

    app.config["service_container"] = container or ServiceContainer(config)

    _logger.info(f"App routes registered: {[str(rule) for rule in app.url_map.iter_rules()]}")
    _logger.info("Flask application initialized successfully")
    return app


def _configure_logging(config) -> None:
    """Configure application logging."""
    handlers = [logging.StreamHandler(sys.stdout)]

    if config.LOG_DIR:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        handlers.append(RotatingFileHandler(
            os.path.join(config.LOG_DIR, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        ))

    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True  # Override any existing configuration
    )
