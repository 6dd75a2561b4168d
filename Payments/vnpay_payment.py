# Payments/vnpay_payment.py
import random
from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional

from Payments.base_payment import BasePaymentMethod
from Payments.models import PaymentMethodInfo


class VNPayPayment(BasePaymentMethod):
    """Domestic bank payment through the VNPay gateway"""

    PAYMENT_TYPE = "VNPAY"
    DEFAULT_PROCESSING_DELAY = 1.2
    MIN_AMOUNT = Decimal(10_000)

    # 2% of the amount, capped at 50,000 VND
    FEE_RATE = Decimal("0.02")
    MAX_FEE = Decimal(50_000)

    VALID_BANK_CODES = frozenset({
        "NCB", "VIETCOMBANK", "VIETINBANK", "TECHCOMBANK", "MBBANK",
        "ACB", "BIDV", "AGRIBANK", "SACOMBANK",
    })

    FAILURE_MESSAGE = "Invalid VNPay information"
    SUCCESS_MESSAGE = "VNPay payment succeeded"

    def validate_payment(self, amount, additional_data: Optional[Dict[str, str]] = None) -> bool:
        value = self._validate_positive_amount(amount)
        if value is None:
            return False

        if value < self.MIN_AMOUNT:
            self.logger.log_warning(
                f"Amount below minimum: {value:,} VND (min: {self.MIN_AMOUNT:,} VND)",
                self.source
            )
            return False

        if not additional_data or "BankCode" not in additional_data:
            self.logger.log_warning("Missing bank code (BankCode)", self.source)
            return False

        bank_code = additional_data["BankCode"]
        if not isinstance(bank_code, str) or bank_code.upper() not in self.VALID_BANK_CODES:
            self.logger.log_warning(f"Invalid bank code: {bank_code}", self.source)
            return False

        return True

    def get_transaction_fee(self, amount) -> Decimal:
        value = self._to_decimal(amount) or Decimal(0)
        return min(value * self.FEE_RATE, self.MAX_FEE)

    @classmethod
    def describe(cls) -> PaymentMethodInfo:
        return PaymentMethodInfo(
            type=cls.PAYMENT_TYPE,
            display_name="VNPay",
            description="Payment through the VNPay gateway",
            min_amount=cls.MIN_AMOUNT,
            max_amount=None,
            fee_description="2% (max 50,000 VND)",
            required_fields=["OrderId", "Amount", "BankCode"]
        )

    @staticmethod
    def mask_card_number(card_number: Optional[str]) -> str:
        """Keep the first and last four digits of a card number"""
        if not card_number or len(card_number) < 8:
            return "****"
        return f"{card_number[:4]} **** **** {card_number[-4:]}"

    def _log_processing_start(self, amount, order_id, additional_data):
        self.logger.log_info(
            f"Connecting to VNPay gateway - Bank: {additional_data.get('BankCode', '')}",
            self.source
        )

    def _generate_transaction_id(self) -> str:
        return f"VNPAY-{datetime.now():%Y%m%d%H%M%S}{random.randint(1000, 9999)}"

    def _build_additional_info(self, additional_data: Dict[str, str]) -> Dict[str, str]:
        return {
            "BankCode": additional_data.get("BankCode") or "N/A",
            "CardNumber": self.mask_card_number(additional_data.get("CardNumber")),
            "VNPayTransactionId": f"VNP{random.randint(10000000, 99999999)}",
            "Currency": "VND",
            "Gateway": "VNPay Payment Gateway",
        }
