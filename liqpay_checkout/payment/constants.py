"""
LiqPay protocol constants and enums.
"""
from enum import Enum


BASE_URL = 'https://www.liqpay.ua/api'
BUTTON_IMAGE_SRC = '//static.liqpay.ua/buttons/p1ru.radius.png'
DEFAULT_API_VERSION = '3'
SANDBOX_MARKER = '1'


class Action(Enum):
    """Checkout actions understood by the gateway."""
    PAY = 'pay'
    HOLD = 'hold'
    SUBSCRIBE = 'subscribe'
    PAYDONATE = 'paydonate'
    AUTH = 'auth'


class Currency(Enum):
    """Payment currencies (ISO 4217)."""
    USD = 'USD'
    EUR = 'EUR'
    UAH = 'UAH'


class Language(Enum):
    """Checkout page languages."""
    UA = 'uk'
    EN = 'en'


# API error codes
class APIErrorCode:
    """Standardized API error codes."""
    INVALID_REQUEST = 'invalid_request'
    MISSING_PARAMETER = 'missing_parameter'
    INVALID_PARAMETER = 'invalid_parameter'
    INTERNAL_ERROR = 'internal_error'
