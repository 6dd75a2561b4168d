# Payments/paypal_payment.py
import random
import uuid
from decimal import Decimal
from typing import Dict, Optional

from Payments.base_payment import BasePaymentMethod
from Payments.models import PaymentMethodInfo


class PaypalPayment(BasePaymentMethod):
    """International payment through a PayPal account"""

    PAYMENT_TYPE = "PAYPAL"
    DEFAULT_PROCESSING_DELAY = 1.5

    # 3.4% + $0.30 per transaction
    FEE_RATE = Decimal("0.034")
    FIXED_FEE = Decimal("0.30")

    FAILURE_MESSAGE = "Invalid PayPal information"
    SUCCESS_MESSAGE = "PayPal payment succeeded"

    def validate_payment(self, amount, additional_data: Optional[Dict[str, str]] = None) -> bool:
        if self._validate_positive_amount(amount) is None:
            return False

        if not additional_data or "PaypalEmail" not in additional_data:
            self.logger.log_warning("Missing PayPal email", self.source)
            return False

        email = additional_data["PaypalEmail"]
        if not isinstance(email, str) or not email or "@" not in email:
            self.logger.log_warning(f"Invalid PayPal email: {email}", self.source)
            return False

        return True

    def get_transaction_fee(self, amount) -> Decimal:
        value = self._to_decimal(amount) or Decimal(0)
        return value * self.FEE_RATE + self.FIXED_FEE

    @classmethod
    def describe(cls) -> PaymentMethodInfo:
        return PaymentMethodInfo(
            type=cls.PAYMENT_TYPE,
            display_name="PayPal",
            description="International payment via PayPal",
            min_amount=Decimal(0),
            max_amount=None,
            fee_description="3.4% + $0.30 per transaction",
            required_fields=["OrderId", "Amount", "PaypalEmail"]
        )

    def _log_processing_start(self, amount, order_id, additional_data):
        self.logger.log_info(
            f"Calling PayPal API for email: {additional_data.get('PaypalEmail', '')}",
            self.source
        )

    def _generate_transaction_id(self) -> str:
        return f"PAYPAL-{uuid.uuid4().hex[:8].upper()}"

    def _build_additional_info(self, additional_data: Dict[str, str]) -> Dict[str, str]:
        return {
            "PaypalEmail": additional_data.get("PaypalEmail") or "N/A",
            "PaypalTransactionId": f"PP-{random.randint(100000, 999999)}",
            "Currency": "USD",
            "ExchangeRate": "23500",
        }
