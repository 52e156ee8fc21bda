"""
Exceptions raised by the LiqPay request builder.
"""


class LiqPayError(Exception):
    """Base exception for liqpay_checkout"""
    pass


class ConfigurationError(LiqPayError):
    """Builder or application configuration is unusable."""
    pass


class ValidationError(LiqPayError):
    """
    Payment data was rejected before signing.

    Attributes:
        field (str): Name of the first offending payment field
        missing (bool): True if the field was absent, False if its value was invalid
    """

    def __init__(self, field, message=None, missing=True):
        self.field = field
        self.missing = missing
        super().__init__(message or f"{field.capitalize()} must be specified!")
