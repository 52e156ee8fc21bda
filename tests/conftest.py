"""
Pytest configuration and fixtures.
"""
import pytest

from liqpay_checkout import create_app, LiqPay

PRIVATE_KEY = 'priv_secret'
PUBLIC_KEY = 'i00000000001'


@pytest.fixture
def make_app():
    """Return a factory creating test apps with config overrides."""
    def _make_app(**overrides):
        config = {
            'TESTING': True,
            'LIQPAY_PUBLIC_KEY': PUBLIC_KEY,
            'LIQPAY_PRIVATE_KEY': PRIVATE_KEY,
        }
        config.update(overrides)
        return create_app(config)
    return _make_app


@pytest.fixture
def app(make_app):
    """Create application for testing."""
    return make_app()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def liqpay():
    """Builder with sandbox disabled."""
    return LiqPay(PRIVATE_KEY, PUBLIC_KEY)


@pytest.fixture
def sandbox_liqpay():
    """Builder with sandbox enabled."""
    return LiqPay(PRIVATE_KEY, PUBLIC_KEY, sandbox=True)


@pytest.fixture
def payload():
    """A complete, valid payment payload."""
    return {
        'action': 'pay',
        'amount': 100,
        'currency': 'UAH',
        'description': 'Test payment',
        'order_id': 'ORD-1'
    }
