"""
Flow logging utilities for checkout signing and builder configuration.
Structured event logging; the private key and signature are never logged.
"""
import logging
from flask import g, has_app_context

logger = logging.getLogger(__name__)


def current_request_id():
    """Request id of the current Flask request, or 'background' outside one."""
    if has_app_context():
        return getattr(g, 'request_id', 'background')
    return 'background'


def _plain(value):
    return getattr(value, 'value', value)


def log_checkout_signed(payment_info, **kwargs):
    """
    Log a successfully signed checkout request.

    Args:
        payment_info: PaymentInfo that was signed
        **kwargs: Additional context
    """
    request_id = current_request_id()

    log_data = {
        'request_id': request_id,
        'event': 'checkout.signed',
        'order_id': payment_info.order_id,
        'action': _plain(payment_info.action),
        'amount': str(payment_info.amount),
        'currency': _plain(payment_info.currency),
        'sandbox': bool(payment_info.sandbox),
        'version': payment_info.version,
    }
    log_data.update(kwargs)

    logger.info(
        f"[{request_id}] checkout.signed: order={log_data.get('order_id')} "
        f"amount={log_data.get('amount')} {log_data.get('currency')} "
        f"action={log_data.get('action')} sandbox={log_data.get('sandbox')}",
        extra=log_data
    )


def log_validation_rejected(field, order_id=None, **kwargs):
    """
    Log a payment rejected before signing.

    Args:
        field (str): First offending field
        order_id (str, optional): Order the payment belongs to
        **kwargs: Additional context
    """
    request_id = current_request_id()

    log_data = {
        'request_id': request_id,
        'event': 'checkout.validation_rejected',
        'field': field,
        'order_id': order_id,
    }
    log_data.update(kwargs)

    logger.warning(
        f"[{request_id}] checkout.validation_rejected: order={order_id} field={field}",
        extra=log_data
    )


def log_api_version_change(old_version, new_version, **kwargs):
    """
    Log an API version override on a builder.

    Args:
        old_version (str): Previous version
        new_version (str): New version
    """
    request_id = current_request_id()

    log_data = {
        'request_id': request_id,
        'event': 'config.api_version_changed',
        'old_version': old_version,
        'new_version': new_version,
    }
    log_data.update(kwargs)

    logger.info(
        f"[{request_id}] config.api_version_changed: {old_version} -> {new_version}",
        extra=log_data
    )
