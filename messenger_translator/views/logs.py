"""Read-only access to the log directory for operational inspection."""
import os

from flask import Blueprint, current_app, send_from_directory

from messenger_translator.utils.responses import text_response

logs_blueprint = Blueprint("logs", __name__)


@logs_blueprint.route("/logs", methods=["GET"])
def list_logs():
    """List log files, newest first."""
    log_dir = current_app.config["LOG_DIR"]
    entries = [
        name for name in os.listdir(log_dir)
        if os.path.isfile(os.path.join(log_dir, name))
    ]
    entries.sort(key=lambda name: os.path.getmtime(os.path.join(log_dir, name)), reverse=True)
    return text_response("\n".join(entries), 200)


@logs_blueprint.route("/logs/<path:filename>", methods=["GET"])
def get_log(filename: str):
    """Serve one log file as plain text."""
    return send_from_directory(current_app.config["LOG_DIR"], filename, mimetype="text/plain")
