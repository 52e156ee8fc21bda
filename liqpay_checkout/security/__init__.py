"""Request signing."""
from .signing import encode_data, decode_data, sign_data, verify_signature

__all__ = ['encode_data', 'decode_data', 'sign_data', 'verify_signature']
