"""Access log line for API requests"""
import json

from tornado.log import access_log

MAX_LINE_LENGTH = 80


def log_api_request(handler) -> None:
    """Tornado ``log_function``: one line per /api request"""
    request = handler.request
    if not request.path.startswith("/api"):
        return

    line = f"{request.method} {request.path} {handler.get_status()} in {1000.0 * request.request_time():.0f}ms"
    payload = getattr(handler, "response_payload", None)
    if payload is not None:
        line += f" :: {json.dumps(payload)}"
    if len(line) > MAX_LINE_LENGTH:
        line = line[:MAX_LINE_LENGTH - 1] + "…"

    if handler.get_status() >= 500:
        access_log.error(line)
    else:
        access_log.info(line)
