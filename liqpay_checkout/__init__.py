from flask import Flask
from flask_cors import CORS

from liqpay_checkout.errors import LiqPayError, ConfigurationError, ValidationError
from liqpay_checkout.payment import Action, Currency, Language, Payload, PaymentInfo, SignedRequest
from liqpay_checkout.sdk import LiqPay
from liqpay_checkout.extensions import liqpay, get_liqpay

__all__ = [
    'create_app',
    'LiqPay',
    'LiqPayError',
    'ConfigurationError',
    'ValidationError',
    'Action',
    'Currency',
    'Language',
    'Payload',
    'PaymentInfo',
    'SignedRequest',
    'liqpay',
    'get_liqpay',
]


def create_app(config=None):
    """
    Application factory serving signed LiqPay checkout requests.

    Args:
        config (dict, optional): Overrides for app.config. LIQPAY_PUBLIC_KEY and
            LIQPAY_PRIVATE_KEY are required; LIQPAY_SANDBOX and
            LIQPAY_API_VERSION are optional.
    """
    app = Flask(__name__)

    # configuration
    app.config['LIQPAY_SANDBOX'] = False
    app.config['LIQPAY_API_VERSION'] = '3'
    if config:
        app.config.update(config)

    # Browser checkouts fetch the signed pair cross-origin
    CORS(app,
         resources={r"/api/*": {"origins": "*"}},
         allow_headers=["Content-Type", "X-Request-ID"],
         expose_headers=["X-Request-ID"],
         methods=["POST", "OPTIONS"],
         supports_credentials=False)

    # Init extensions
    liqpay.init_app(app)

    # Initialize middleware
    from liqpay_checkout.middleware import init_request_tracking
    init_request_tracking(app)

    # Register blueprints
    from liqpay_checkout.api.v1 import api_v1_bp
    from liqpay_checkout.routes.checkout import checkout_bp

    app.register_blueprint(api_v1_bp)
    app.register_blueprint(checkout_bp)

    return app
