"""Health check endpoints."""
import logging
from flask import Blueprint, jsonify, current_app

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": "messenger-translator"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks dependencies).

    Returns:
        JSON response with readiness status
    """
    checks = {}
    container = current_app.config["service_container"]

    try:
        container.get_user_repository()
        container.get_translation_provider()
        container.get_message_provider()
        checks["services"] = True
    except Exception as e:
        _logger.error(f"Service readiness check failed: {e}")
        checks["services"] = False

    if current_app.config.get("USER_STORAGE_TYPE") == "redis":
        try:
            cache = container.get_cache()
            checks["redis"] = bool(cache and cache.ping())
        except Exception as e:
            _logger.error(f"Redis health check failed: {e}")
            checks["redis"] = False

    checks["overall"] = all(checks.values())
    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).

    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": "messenger-translator"
    }), 200
