"""
LiqPay checkout request builder

Builds the signed data/signature pair the LiqPay checkout page expects,
or a ready-made HTML form posting it. Nothing here talks to the network.

Usage:
    from liqpay_checkout import LiqPay

    liqpay = LiqPay(
        private_key='your_private_key',
        public_key='your_public_key',
        sandbox=True
    )

    signed = liqpay.build_signed_request({
        'action': 'pay',
        'amount': '99.99',
        'currency': 'UAH',
        'description': 'Order #123',
        'order_id': 'ORD-123'
    })

    html = liqpay.build_html_form({...})
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Union

from jinja2 import Environment, PackageLoader, select_autoescape

from liqpay_checkout.errors import ConfigurationError, ValidationError
from liqpay_checkout.payment.constants import (
    Action,
    Currency,
    Language,
    BASE_URL,
    BUTTON_IMAGE_SRC,
    DEFAULT_API_VERSION,
    SANDBOX_MARKER,
)
from liqpay_checkout.payment.info import Payload, PaymentInfo, SignedRequest, coerce_enum, json_amount
from liqpay_checkout.security import signing
from liqpay_checkout.utils.flow_logging import (
    log_checkout_signed,
    log_validation_rejected,
    log_api_version_change,
)

logger = logging.getLogger(__name__)

templates = Environment(
    loader=PackageLoader('liqpay_checkout', 'templates'),
    autoescape=select_autoescape(['html'])
)


class LiqPay:
    """LiqPay checkout request builder"""

    base_url = BASE_URL
    image_src = BUTTON_IMAGE_SRC

    def __init__(self,
                 private_key: str,
                 public_key: str,
                 sandbox: bool = False):
        """
        Initialize the builder

        Args:
            private_key: Merchant private key, used only for signing
            public_key: Merchant public key, embedded in every request
            sandbox: Mark every request as a sandbox (test) payment
        """
        self._private_key = private_key
        self.public_key = public_key
        self.sandbox = bool(sandbox)
        self.api_version = DEFAULT_API_VERSION

    def __repr__(self):
        return (f"LiqPay(public_key={self.public_key!r}, sandbox={self.sandbox}, "
                f"api_version={self.api_version!r})")

    @property
    def checkout_url(self) -> str:
        return f"{self.base_url}/{self.api_version}/checkout"

    def configure_version(self, api_version: str) -> None:
        """
        Override the LiqPay API version (default "3")

        Raises:
            ConfigurationError: If api_version is empty
        """
        if not api_version:
            raise ConfigurationError("API version not specified!")

        old_version = self.api_version
        self.api_version = str(api_version)
        log_api_version_change(old_version, self.api_version)

    # Request building

    def build_signed_request(self, payload: Union[Payload, Mapping[str, Any]]) -> SignedRequest:
        """
        Generate data and signature for a LiqPay payment

        Args:
            payload: Payload instance or mapping with action, amount, currency,
                description, order_id and optionally language

        Returns:
            SignedRequest with base64 data and signature

        Raises:
            ValidationError: First missing or invalid required field
        """
        payment = self.prepare_payment(payload)
        self.validate(payment)

        data = signing.encode_data(payment.to_dict())
        signature = signing.sign_data(self._private_key, data)

        log_checkout_signed(payment)

        return SignedRequest(data=data, signature=signature)

    def build_html_form(self, payload: Union[Payload, Mapping[str, Any]]) -> str:
        """
        Generate an HTML form posting the signed request to the checkout page

        Args:
            payload: Same as build_signed_request

        Returns:
            HTML form markup
        """
        signed = self.build_signed_request(payload)

        return templates.get_template('liqpay/checkout_form.html').render(
            action=self.checkout_url,
            data=signed.data,
            signature=signed.signature,
            image_src=self.image_src
        )

    def prepare_payment(self, payload: Union[Payload, Mapping[str, Any]]) -> PaymentInfo:
        """
        Merge caller payload with builder defaults.

        Language falls back to Ukrainian. Version, public key and the
        sandbox marker always come from the builder.
        """
        if not isinstance(payload, Payload):
            payload = Payload.from_dict(payload)

        return PaymentInfo(
            action=coerce_enum(Action, payload.action),
            amount=payload.amount,
            currency=coerce_enum(Currency, payload.currency),
            description=payload.description,
            order_id=payload.order_id,
            language=coerce_enum(Language, payload.language) or Language.UA,
            sandbox=SANDBOX_MARKER if self.sandbox else None,
            version=self.api_version,
            public_key=self.public_key,
        )

    def validate(self, payment: PaymentInfo) -> None:
        """
        Check required fields in order: version, amount, currency, description.

        Raises:
            ValidationError: For the first offending field only
        """
        try:
            self._check_payment(payment)
        except ValidationError as exc:
            log_validation_rejected(exc.field, payment.order_id, reason=str(exc))
            raise

    def _check_payment(self, payment: PaymentInfo) -> None:
        if not payment.version:
            raise ValidationError('version')

        if payment.amount is None or payment.amount == '':
            raise ValidationError('amount')
        try:
            amount = Decimal(str(payment.amount))
        except (InvalidOperation, ValueError):
            raise ValidationError('amount', f"Invalid amount: {payment.amount!r}", missing=False)
        if not amount.is_finite():
            raise ValidationError('amount', f"Invalid amount: {payment.amount!r}", missing=False)
        if amount == 0:
            raise ValidationError('amount')
        if amount < 0:
            raise ValidationError('amount', "Amount must be greater than zero", missing=False)
        if Decimal(str(json_amount(amount))) != amount:
            raise ValidationError(
                'amount',
                f"Amount cannot be represented exactly: {payment.amount!r}",
                missing=False
            )

        if not payment.currency:
            raise ValidationError('currency')
        if not isinstance(payment.currency, Currency):
            raise ValidationError(
                'currency',
                f"Unsupported currency: {payment.currency!r}",
                missing=False
            )

        if payment.description is None or not str(payment.description).strip():
            raise ValidationError('description')

    # Helpers for inspecting signed data

    def decode_data(self, data: str) -> Dict[str, Any]:
        """Decode a base64 data string into payment params"""
        return signing.decode_data(data)

    def verify_signature(self, data: str, signature: str) -> bool:
        """
        Check a signature against data using this builder's private key

        Returns:
            True if signature is valid
        """
        return signing.verify_signature(self._private_key, data, signature)
