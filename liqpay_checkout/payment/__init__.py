"""Payment data package."""
from .constants import (
    Action,
    Currency,
    Language,
    APIErrorCode,
    BASE_URL,
    BUTTON_IMAGE_SRC,
    DEFAULT_API_VERSION,
)
from .info import Payload, PaymentInfo, SignedRequest

__all__ = [
    'Action',
    'Currency',
    'Language',
    'APIErrorCode',
    'BASE_URL',
    'BUTTON_IMAGE_SRC',
    'DEFAULT_API_VERSION',
    'Payload',
    'PaymentInfo',
    'SignedRequest',
]
