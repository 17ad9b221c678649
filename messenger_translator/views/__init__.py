"""Views module - exports all blueprints."""
from messenger_translator.views.webhook import webhook_blueprint
from messenger_translator.views.health import health_blueprint
from messenger_translator.views.logs import logs_blueprint

__all__ = ["webhook_blueprint", "health_blueprint", "logs_blueprint"]
