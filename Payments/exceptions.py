# Payments/exceptions.py
from typing import List, Optional


class PaymentError(Exception):
    """Base class for errors raised by the payment subsystem"""


class UnsupportedPaymentTypeError(PaymentError):
    """Raised when a payment type cannot be mapped to any payment method"""

    def __init__(self, payment_type, supported_methods: Optional[List[str]] = None):
        self.payment_type = payment_type
        self.supported_methods = list(supported_methods or [])
        super().__init__(f"Payment method '{payment_type}' is not supported")
