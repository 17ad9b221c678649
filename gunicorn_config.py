"""Gunicorn configuration for production.

    gunicorn -c gunicorn_config.py "messenger_translator:create_app()"
"""
import multiprocessing
import os

# Server socket
bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
backlog = 2048

# Worker processes
# Web workers verify signatures and enqueue events; translation runs in Celery
workers = int(os.getenv("GUNICORN_WORKERS", "0")) or min(max(multiprocessing.cpu_count(), 2), 4)
worker_class = "sync"

# With EVENT_DISPATCH_MODE=sync a delivery makes several outbound calls per event
# (indicators, user store, translation, send), each bounded by REQUEST_TIMEOUT
_request_timeout = int(os.getenv("REQUEST_TIMEOUT", "10"))
timeout = int(os.getenv("GUNICORN_TIMEOUT", str(max(60, _request_timeout * 6))))
graceful_timeout = 30
keepalive = 5

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

proc_name = "messenger-translator"


def worker_exit(server, worker):
    """Release the Redis pools of an exiting worker."""
    from messenger_translator.infrastructure.redis_client import RedisClientFactory
    RedisClientFactory.close()
