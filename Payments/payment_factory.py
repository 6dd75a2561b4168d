# Payments/payment_factory.py
import threading
from typing import Dict, List, Optional, Type

from Logger.logger import LoggerService
from Payments.base_payment import BasePaymentMethod
from Payments.cash_payment import CashPayment
from Payments.exceptions import UnsupportedPaymentTypeError
from Payments.models import PaymentMethodInfo
from Payments.paypal_payment import PaypalPayment
from Payments.vnpay_payment import VNPayPayment


class PaymentFactory:
    """
    Creates payment method instances from a payment type string.

    This class:
    1. Normalizes the requested type and resolves it through an alias table
    2. Builds a new payment method object on every call
    3. Counts how many objects were created per normalized type
    """

    # Canonical type -> (accepted aliases, implementing class)
    PAYMENT_METHODS: Dict[str, tuple] = {
        "CASH": (frozenset({"CASH", "TIỀN MẶT", "TIEN_MAT"}), CashPayment),
        "PAYPAL": (frozenset({"PAYPAL"}), PaypalPayment),
        "VNPAY": (frozenset({"VNPAY", "VN_PAY"}), VNPayPayment),
    }

    def __init__(self, logger: LoggerService = None, processing_delays: Optional[Dict[str, float]] = None):
        """
        Initialize the payment factory.

        Args:
            logger: Shared logger instance, defaults to the process-wide one
            processing_delays: Simulated latency per canonical type, in seconds
        """
        self.logger = logger or LoggerService.instance()
        self.processing_delays = {k.upper(): v for k, v in (processing_delays or {}).items()}

        # Alias -> canonical type, flattened once for lookups
        self._alias_table: Dict[str, str] = {}
        for canonical, (aliases, _) in self.PAYMENT_METHODS.items():
            for alias in aliases:
                self._alias_table[alias] = canonical

        self._creation_stats: Dict[str, int] = {}
        self._stats_lock = threading.Lock()

        self.logger.log_info("PaymentFactory initialized", "PaymentFactory")

    @staticmethod
    def _normalize(payment_type) -> str:
        return payment_type.strip().upper()

    def _resolve(self, payment_type) -> Optional[str]:
        if not isinstance(payment_type, str):
            return None
        return self._alias_table.get(self._normalize(payment_type))

    def create_payment_method(self, payment_type: str) -> BasePaymentMethod:
        """
        Create a new payment method for the given type.

        Args:
            payment_type: Payment type or one of its aliases, any case

        Returns:
            A freshly constructed payment method

        Raises:
            UnsupportedPaymentTypeError: If the type matches no alias
        """
        self.logger.log_info(f"Factory creating payment method: {payment_type}", "PaymentFactory")

        canonical = self._resolve(payment_type)
        if canonical is None:
            self.logger.log_warning(f"Unsupported payment method: {payment_type}", "PaymentFactory")
            raise UnsupportedPaymentTypeError(payment_type, self.get_supported_payment_methods())

        normalized_type = self._normalize(payment_type)
        payment_class: Type[BasePaymentMethod] = self.PAYMENT_METHODS[canonical][1]
        payment_method = payment_class(
            logger=self.logger,
            processing_delay=self.processing_delays.get(canonical)
        )

        with self._stats_lock:
            self._creation_stats[normalized_type] = self._creation_stats.get(normalized_type, 0) + 1
            total_created = self._creation_stats[normalized_type]

        self.logger.log_info(
            f"Factory created {payment_method.payment_type} payment method (Total created: {total_created})",
            "PaymentFactory"
        )

        return payment_method

    def get_supported_payment_methods(self) -> List[str]:
        return list(self.PAYMENT_METHODS.keys())

    def is_payment_method_supported(self, payment_type: str) -> bool:
        """Check the full alias set, not only canonical names"""
        return self._resolve(payment_type) is not None

    def get_payment_methods_info(self) -> List[PaymentMethodInfo]:
        """Describe every supported method without constructing any of them"""
        return [payment_class.describe() for _, payment_class in self.PAYMENT_METHODS.values()]

    def get_creation_statistics(self) -> Dict[str, int]:
        with self._stats_lock:
            return dict(self._creation_stats)

    def reset_statistics(self):
        """Clear creation counters"""
        with self._stats_lock:
            self._creation_stats.clear()
        self.logger.log_info("Factory statistics have been reset", "PaymentFactory")
