"""
Payment data passed through the builder.

Payload is what the caller asks for, PaymentInfo is what gets signed and
SignedRequest is what the gateway receives.
"""
import logging
from dataclasses import dataclass, asdict
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional, Union

from .constants import Action, Currency, Language

logger = logging.getLogger(__name__)

PAYLOAD_FIELDS = ('action', 'amount', 'currency', 'description', 'order_id', 'language')


def coerce_enum(enum_cls, value):
    """Return the enum member matching value, or value unchanged if none does."""
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        candidate = candidate.upper() if enum_cls is Currency else candidate.lower()
        try:
            return enum_cls(candidate)
        except ValueError:
            return value
    return value


def _plain(value):
    return value.value if isinstance(value, Enum) else value


def json_amount(amount):
    """Amount as written into the signed JSON: 100, not 100.0."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return amount
    if value == value.to_integral_value():
        return int(value)
    return float(value)


@dataclass
class Payload:
    """Caller-supplied payment intent."""
    action: Union[Action, str, None] = None
    amount: Union[Decimal, int, float, str, None] = None
    currency: Union[Currency, str, None] = None
    description: Optional[str] = None
    order_id: Optional[str] = None
    language: Union[Language, str, None] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Payload':
        """
        Build a payload from a plain mapping.

        Keys outside the payload fields are dropped. This includes
        version, public_key and sandbox, which only the builder sets.
        """
        ignored = [key for key in data if key not in PAYLOAD_FIELDS]
        if ignored:
            logger.warning(
                f"Ignoring payload fields: {', '.join(sorted(map(str, ignored)))}",
                extra={'event': 'payload.fields_ignored', 'fields': ignored}
            )
        return cls(**{key: data[key] for key in PAYLOAD_FIELDS if key in data})


@dataclass
class PaymentInfo:
    """Payload enriched with protocol identity fields."""
    public_key: str
    version: Optional[str]
    action: Union[Action, str, None] = None
    amount: Union[Decimal, int, float, str, None] = None
    currency: Union[Currency, str, None] = None
    description: Optional[str] = None
    order_id: Optional[str] = None
    language: Union[Language, str, None] = None
    sandbox: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Dictionary form used for signing.

        Key order is part of the signed text and must stay
        action, amount, currency, description, order_id, language,
        sandbox, version, public_key. Unset payload fields are omitted.
        """
        params = {}
        for name in PAYLOAD_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            params[name] = json_amount(value) if name == 'amount' else _plain(value)
        if self.sandbox:
            params['sandbox'] = self.sandbox
        params['version'] = self.version
        params['public_key'] = self.public_key
        return params


@dataclass(frozen=True)
class SignedRequest:
    """Base64 data and signature pair accepted by the checkout endpoint."""
    data: str
    signature: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
