"""
Signing utilities for LiqPay checkout data.
"""
import base64
import hashlib
import hmac
import json

from liqpay_checkout.errors import ConfigurationError


def encode_data(params):
    """
    Serialize payment params to the base64 data string.

    Args:
        params (dict): Payment params in signing order

    Returns:
        str: Base64 of the compact UTF-8 JSON text
    """
    # Compact, insertion-ordered, non-ASCII kept as UTF-8
    payload_json = json.dumps(params, separators=(',', ':'), ensure_ascii=False)
    return base64.b64encode(_to_utf8(payload_json)).decode('ascii')


def _to_utf8(text):
    # Lone surrogates become U+FFFD, pairs are joined
    well_formed = text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'replace')
    return well_formed.encode('utf-8')


def decode_data(data):
    """
    Parse a base64 data string back into payment params.

    Args:
        data (str): Base64 data as produced by encode_data

    Returns:
        dict: Payment params, key order preserved
    """
    return json.loads(base64.b64decode(data).decode('utf-8'))


def sign_data(private_key, data):
    """
    Generate the checkout signature for encoded data.

    Args:
        private_key (str): Merchant private key
        data (str): Base64 data string

    Returns:
        str: base64(sha1(private_key + data + private_key))
    """
    if not private_key:
        raise ConfigurationError("Private key is required for signing")

    signing_string = f"{private_key}{data}{private_key}"
    digest = hashlib.sha1(_to_utf8(signing_string)).digest()

    return base64.b64encode(digest).decode('ascii')


def verify_signature(private_key, data, provided_signature):
    """
    Verify a signature against encoded data.

    Args:
        private_key (str): Merchant private key
        data (str): Base64 data string
        provided_signature (str): Signature to check

    Returns:
        bool: True if signature is valid
    """
    if not private_key or not data or not provided_signature:
        return False

    expected_signature = sign_data(private_key, data)
    return hmac.compare_digest(
        expected_signature.encode('utf-8'),
        _to_utf8(str(provided_signature))
    )
