# Payments/cash_payment.py
import random
from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional

from Payments.base_payment import BasePaymentMethod
from Payments.models import PaymentMethodInfo


class CashPayment(BasePaymentMethod):
    """Cash paid at the counter. No fee, capped at 100 million VND."""

    PAYMENT_TYPE = "CASH"
    DEFAULT_PROCESSING_DELAY = 0.5
    MAX_AMOUNT = Decimal(100_000_000)

    FAILURE_MESSAGE = "Invalid cash amount"
    SUCCESS_MESSAGE = "Cash payment succeeded"

    def validate_payment(self, amount, additional_data: Optional[Dict[str, str]] = None) -> bool:
        value = self._validate_positive_amount(amount)
        if value is None:
            return False

        if value > self.MAX_AMOUNT:
            self.logger.log_warning(f"Amount exceeds cash limit: {value:,} VND", self.source)
            return False

        return True

    def get_transaction_fee(self, amount) -> Decimal:
        return Decimal(0)

    @classmethod
    def describe(cls) -> PaymentMethodInfo:
        return PaymentMethodInfo(
            type=cls.PAYMENT_TYPE,
            display_name="Cash",
            description="Pay directly in cash",
            min_amount=Decimal(0),
            max_amount=cls.MAX_AMOUNT,
            fee_description="Free",
            required_fields=["OrderId", "Amount"]
        )

    def _generate_transaction_id(self) -> str:
        return f"CASH-{datetime.now():%Y%m%d%H%M%S}-{random.randint(1000, 9999)}"

    def _build_additional_info(self, additional_data: Dict[str, str]) -> Dict[str, str]:
        return {
            "ReceivedAmount": additional_data.get("ReceivedAmount", "0"),
            "ChangeAmount": additional_data.get("ChangeAmount", "0"),
            "Cashier": additional_data.get("Cashier", "Unknown"),
        }
