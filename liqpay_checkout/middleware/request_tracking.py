"""
Request tracking middleware.
Adds X-Request-ID to all responses, logs request timing and turns
unhandled errors into the standard JSON error envelope.
"""
import uuid
import time
import logging
from flask import request, g
from werkzeug.exceptions import HTTPException

from liqpay_checkout.api.v1.errors import error_response, internal_error

logger = logging.getLogger(__name__)


def _request_context():
    return {
        'request_id': getattr(g, 'request_id', 'unknown'),
        'method': request.method,
        'path': request.path,
    }


def init_request_tracking(app):
    """Initialize request tracking middleware."""

    @app.before_request
    def start_request_tracking():
        # Reuse the caller's request ID when one is supplied
        g.request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())
        g.start_time = time.time()

        logger.info(
            f"[{g.request_id}] {request.method} {request.path}",
            extra=dict(_request_context(), remote_addr=request.remote_addr)
        )

    @app.after_request
    def finish_request_tracking(response):
        if hasattr(g, 'request_id'):
            response.headers['X-Request-ID'] = g.request_id
            duration = time.time() - g.get('start_time', time.time())

            logger.info(
                f"[{g.request_id}] {request.method} {request.path} -> "
                f"{response.status_code} ({duration:.3f}s)",
                extra=dict(
                    _request_context(),
                    status_code=response.status_code,
                    duration_seconds=duration
                )
            )

        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        context = _request_context()
        logger.warning(
            f"[{context['request_id']}] {error.code} {error.name}: {request.method} {request.path}",
            extra=context
        )
        return error_response(
            error.name.lower().replace(' ', '_'),
            error.description,
            None,
            error.code
        )

    @app.errorhandler(Exception)
    def handle_exception(error):
        context = _request_context()
        logger.exception(
            f"[{context['request_id']}] Unhandled exception: {request.method} {request.path}",
            extra=dict(context, error_type=type(error).__name__)
        )
        return internal_error('An unexpected error occurred')

    logger.info("Request tracking middleware initialized")
