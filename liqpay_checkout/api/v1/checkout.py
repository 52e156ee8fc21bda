"""
v1 Checkout API endpoints.
"""
from flask import request, jsonify

from . import api_v1_bp
from .errors import invalid_request_error, validation_error
from liqpay_checkout.errors import ValidationError
from liqpay_checkout.extensions import get_liqpay


@api_v1_bp.route('/checkout', methods=['POST'])
def create_checkout():
    """
    Sign a payment for the LiqPay checkout page.

    Request body:
        {
            "action": "pay",
            "amount": 100.00,
            "currency": "UAH",
            "description": "Payment for order 123",
            "order_id": "order_123",
            "language": "en"  // optional, defaults to "uk"
        }

    Returns:
        {
            "data": "eyJhY3Rpb24iOi...",
            "signature": "QvJD5u9Fg55PCx/Hdz6lzWtYwcI=",
            "checkout_url": "https://www.liqpay.ua/api/3/checkout"
        }
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return invalid_request_error('Request body must be a JSON object')

    liqpay = get_liqpay()
    try:
        signed = liqpay.build_signed_request(payload)
    except ValidationError as e:
        return validation_error(e)

    response = signed.to_dict()
    response['checkout_url'] = liqpay.checkout_url

    return jsonify(response), 200
