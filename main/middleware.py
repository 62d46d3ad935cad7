import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """WSGI wrapper logging each request with its status and duration"""

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        method = environ["REQUEST_METHOD"]
        path = environ["PATH_INFO"]
        if environ.get("QUERY_STRING"):
            path = f"{path}?{environ['QUERY_STRING']}"
        started = time.time()

        def logging_start_response(status, headers, exc_info=None):
            elapsed = round((time.time() - started) * 1000, 1)
            logger.info(f"{method} {path} -> {status} ({elapsed} ms)")
            return start_response(status, headers, exc_info)

        return self.app(environ, logging_start_response)
