"""
Flask extension exposing a configured LiqPay builder.
"""
import logging
from flask import current_app

from liqpay_checkout.errors import ConfigurationError
from liqpay_checkout.payment.constants import DEFAULT_API_VERSION
from liqpay_checkout.sdk import LiqPay

logger = logging.getLogger(__name__)


class LiqPayExtension:
    """Builds one LiqPay builder per app from app.config."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.config.setdefault('LIQPAY_SANDBOX', False)
        app.config.setdefault('LIQPAY_API_VERSION', DEFAULT_API_VERSION)

        missing = [key for key in ('LIQPAY_PUBLIC_KEY', 'LIQPAY_PRIVATE_KEY')
                   if not app.config.get(key)]
        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")

        builder = LiqPay(
            private_key=app.config['LIQPAY_PRIVATE_KEY'],
            public_key=app.config['LIQPAY_PUBLIC_KEY'],
            sandbox=app.config['LIQPAY_SANDBOX']
        )
        if app.config['LIQPAY_API_VERSION'] != builder.api_version:
            builder.configure_version(app.config['LIQPAY_API_VERSION'])

        app.extensions['liqpay'] = builder
        logger.info(f"LiqPay builder initialized: {builder!r}")

    @staticmethod
    def get_liqpay():
        """Builder bound to the current app."""
        return current_app.extensions['liqpay']


liqpay = LiqPayExtension()
get_liqpay = LiqPayExtension.get_liqpay
