import time

from flask import g, request


def register_request_logging(flask_app) -> None:
    """Log one line per request: time, status, method, path and latency."""
    time_format = flask_app.config.get('REQUEST_LOG_TIME_FORMAT', '%Y-%m-%d %H:%M:%S')

    def _write_line(status_code):
        started = g.get('request_started')
        latency_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        flask_app.logger.info(
            f"[{time.strftime(time_format)}] {status_code} - "
            f"{request.method} {request.path} ({latency_ms:.3f}ms)"
        )
        g.request_logged = True

    @flask_app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()
        g.request_logged = False

    @flask_app.after_request
    def _log_request(response):
        _write_line(response.status_code)
        return response

    @flask_app.teardown_request
    def _log_failed_request(exc):
        # after_request is skipped when the exception propagates
        if not g.get('request_logged', True):
            _write_line(500)
