"""
Standardized error responses for API v1.
"""
from flask import jsonify

from liqpay_checkout.payment.constants import APIErrorCode
from liqpay_checkout.utils.flow_logging import current_request_id


def error_response(code, message, details=None, status_code=400):
    """
    Generate standardized error response.

    Args:
        code (str): Error code from APIErrorCode
        message (str): Human-readable error message
        details (dict, optional): Additional error details
        status_code (int): HTTP status code

    Returns:
        tuple: (response, status_code)
    """
    response = {
        'error': {
            'code': code,
            'message': message,
            'details': details,
            'request_id': current_request_id()
        }
    }

    return jsonify(response), status_code


def invalid_request_error(message, details=None):
    """Invalid request error (400)."""
    return error_response(
        APIErrorCode.INVALID_REQUEST,
        message,
        details,
        400
    )


def validation_error(error):
    """Map a ValidationError to a 400 naming the offending field."""
    code = APIErrorCode.MISSING_PARAMETER if error.missing else APIErrorCode.INVALID_PARAMETER
    return error_response(
        code,
        str(error),
        {'field': error.field},
        400
    )


def internal_error(message='Internal server error'):
    """Internal server error (500)."""
    return error_response(
        APIErrorCode.INTERNAL_ERROR,
        message,
        None,
        500
    )
