# Payments/base_payment.py
import time
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from Logger.logger import LoggerService
from Payments.models import PaymentRequest, PaymentResult, PaymentMethodInfo


class BasePaymentMethod(ABC):
    """
    Base class for all payment methods.

    Subclasses supply the validation rules, fee formula, transaction id shape
    and method specific result details. The processing flow itself
    (validate, simulate the gateway call, compute totals) lives here so every
    payment method returns the same result shape.
    """

    # Canonical discriminator, set by every subclass
    PAYMENT_TYPE = ""

    # Seconds spent simulating the gateway call when no delay is given
    DEFAULT_PROCESSING_DELAY = 0.0

    # Message returned on validation failure
    FAILURE_MESSAGE = "Invalid payment information"
    SUCCESS_MESSAGE = "Payment processed successfully"

    def __init__(self, logger: LoggerService = None, processing_delay: Optional[float] = None):
        """
        Initialize the payment method.

        Args:
            logger: Shared logger instance, defaults to the process-wide one
            processing_delay: Simulated processing latency in seconds
        """
        self.logger = logger or LoggerService.instance()
        self.processing_delay = self.DEFAULT_PROCESSING_DELAY if processing_delay is None else processing_delay

        self.logger.log_info(f"{type(self).__name__} instance created", self.source)

    @property
    def payment_type(self) -> str:
        """Canonical discriminator of this payment method"""
        return self.PAYMENT_TYPE

    @property
    def source(self) -> str:
        return type(self).__name__

    @abstractmethod
    def validate_payment(self, amount, additional_data: Optional[Dict[str, str]] = None) -> bool:
        """Check method specific preconditions. Never raises."""

    @abstractmethod
    def get_transaction_fee(self, amount) -> Decimal:
        """Fee charged on top of amount"""

    @classmethod
    @abstractmethod
    def describe(cls) -> PaymentMethodInfo:
        """Static description of the method for clients"""

    @abstractmethod
    def _generate_transaction_id(self) -> str:
        pass

    @abstractmethod
    def _build_additional_info(self, additional_data: Dict[str, str]) -> Dict[str, str]:
        pass

    def _log_processing_start(self, amount: Decimal, order_id: str, additional_data: Dict[str, str]):
        """Hook for method specific trace lines before the gateway call"""

    def process_payment(self, amount, order_id: str,
                        additional_data: Optional[Dict[str, str]] = None) -> PaymentResult:
        """
        Validate and process a payment.

        Args:
            amount: Amount to charge
            order_id: Order the payment belongs to
            additional_data: Method specific fields (emails, bank codes, ...)

        Returns:
            PaymentResult, with success=False when validation fails
        """
        additional_data = additional_data or {}
        self.logger.log_info(
            f"Processing {self.payment_type} payment - Order: {order_id}, Amount: {amount}",
            self.source
        )

        if not self.validate_payment(amount, additional_data):
            self.logger.log_error(f"{self.payment_type} payment failed - Validation failed", self.source)
            return PaymentResult(
                success=False,
                message=self.FAILURE_MESSAGE,
                payment_type=self.payment_type,
                amount=self._to_decimal(amount) or Decimal(0),
                processed_at=datetime.now()
            )

        amount = self._to_decimal(amount)
        self._log_processing_start(amount, order_id, additional_data)
        self._simulate_processing()

        transaction_fee = self.get_transaction_fee(amount)
        total_amount = amount + transaction_fee
        transaction_id = self._generate_transaction_id()

        self.logger.log_info(
            f"{self.payment_type} payment succeeded - Transaction ID: {transaction_id}",
            self.source
        )

        return PaymentResult(
            success=True,
            message=self.SUCCESS_MESSAGE,
            transaction_id=transaction_id,
            payment_type=self.payment_type,
            amount=amount,
            transaction_fee=transaction_fee,
            total_amount=total_amount,
            processed_at=datetime.now(),
            additional_info=self._build_additional_info(additional_data)
        )

    def process_request(self, request: PaymentRequest) -> PaymentResult:
        """Process a PaymentRequest built by the caller"""
        return self.process_payment(request.amount, request.order_id, request.additional_data)

    def _simulate_processing(self):
        if self.processing_delay > 0:
            time.sleep(self.processing_delay)

    def _validate_positive_amount(self, amount) -> Optional[Decimal]:
        """Return amount as a Decimal when it is a positive number, None otherwise"""
        value = self._to_decimal(amount)
        if value is None or value <= 0:
            self.logger.log_warning(f"Invalid amount: {amount}", self.source)
            return None
        return value

    @staticmethod
    def _to_decimal(amount) -> Optional[Decimal]:
        if isinstance(amount, bool):
            return None
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except (InvalidOperation, ValueError, TypeError):
            return None
        if not value.is_finite():
            return None
        return value
