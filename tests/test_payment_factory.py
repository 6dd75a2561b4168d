# tests/test_payment_factory.py
import threading
import unittest
from unittest.mock import MagicMock, patch

from Payments.cash_payment import CashPayment
from Payments.exceptions import UnsupportedPaymentTypeError, PaymentError
from Payments.payment_factory import PaymentFactory
from Payments.paypal_payment import PaypalPayment
from Payments.vnpay_payment import VNPayPayment


class TestPaymentFactory(unittest.TestCase):
    """Test cases for the PaymentFactory class"""

    def setUp(self):
        self.logger = MagicMock()
        self.factory = PaymentFactory(logger=self.logger, processing_delays={"CASH": 0, "PAYPAL": 0, "VNPAY": 0})

    def test_create_normalizes_input(self):
        """Type strings are trimmed and case-folded"""
        self.assertIsInstance(self.factory.create_payment_method("cash "), CashPayment)
        self.assertIsInstance(self.factory.create_payment_method("  PayPal"), PaypalPayment)
        self.assertIsInstance(self.factory.create_payment_method("vnpay"), VNPayPayment)

    def test_create_accepts_aliases(self):
        self.assertIsInstance(self.factory.create_payment_method("TIEN_MAT"), CashPayment)
        self.assertIsInstance(self.factory.create_payment_method("tiền mặt"), CashPayment)
        self.assertIsInstance(self.factory.create_payment_method("vn_pay"), VNPayPayment)

    def test_vietnamese_cash_alias_with_diacritics(self):
        """The accented cash alias resolves after trimming and case folding"""
        self.assertIsInstance(self.factory.create_payment_method(" tiền mặt "), CashPayment)
        self.assertIsInstance(self.factory.create_payment_method("TIỀN MẶT"), CashPayment)
        self.assertTrue(self.factory.is_payment_method_supported("Tiền Mặt"))
        self.assertEqual(self.factory.get_creation_statistics(), {"TIỀN MẶT": 2})

    def test_create_unsupported_raises(self):
        """Unknown types raise with the offending input and the supported list"""
        with self.assertRaises(UnsupportedPaymentTypeError) as ctx:
            self.factory.create_payment_method("BITCOIN")

        self.assertEqual(ctx.exception.payment_type, "BITCOIN")
        self.assertEqual(ctx.exception.supported_methods, ["CASH", "PAYPAL", "VNPAY"])
        self.assertIsInstance(ctx.exception, PaymentError)
        self.assertIn("BITCOIN", str(ctx.exception))
        self.logger.log_warning.assert_called()

    def test_create_rejects_non_string(self):
        with self.assertRaises(UnsupportedPaymentTypeError):
            self.factory.create_payment_method(None)

    def test_unsupported_type_not_counted(self):
        with self.assertRaises(UnsupportedPaymentTypeError):
            self.factory.create_payment_method("BITCOIN")
        self.assertEqual(self.factory.get_creation_statistics(), {})

    def test_create_returns_new_instance_each_call(self):
        """Objects are never cached, but every creation is counted"""
        first = self.factory.create_payment_method("CASH")
        second = self.factory.create_payment_method("CASH")

        self.assertIsNot(first, second)
        self.assertEqual(self.factory.get_creation_statistics()["CASH"], 2)

    def test_statistics_keyed_by_normalized_input(self):
        self.factory.create_payment_method("cash")
        self.factory.create_payment_method("TIEN_MAT")
        self.factory.create_payment_method("vnpay")

        self.assertEqual(self.factory.get_creation_statistics(), {"CASH": 1, "TIEN_MAT": 1, "VNPAY": 1})

    def test_statistics_snapshot_and_reset(self):
        self.factory.create_payment_method("PAYPAL")
        snapshot = self.factory.get_creation_statistics()
        snapshot["PAYPAL"] = 99

        self.assertEqual(self.factory.get_creation_statistics(), {"PAYPAL": 1})

        self.factory.reset_statistics()
        self.assertEqual(self.factory.get_creation_statistics(), {})
        self.assertEqual(snapshot["PAYPAL"], 99)

    def test_supported_methods_are_canonical(self):
        self.assertEqual(self.factory.get_supported_payment_methods(), ["CASH", "PAYPAL", "VNPAY"])

    def test_alias_support_is_wider_than_canonical_list(self):
        """An alias is supported even though it is not listed"""
        self.assertTrue(self.factory.is_payment_method_supported("TIEN_MAT"))
        self.assertNotIn("TIEN_MAT", self.factory.get_supported_payment_methods())
        self.assertTrue(self.factory.is_payment_method_supported(" vn_pay "))
        self.assertFalse(self.factory.is_payment_method_supported("BITCOIN"))
        self.assertFalse(self.factory.is_payment_method_supported(""))
        self.assertFalse(self.factory.is_payment_method_supported(None))

    def test_processing_delays_passed_to_methods(self):
        factory = PaymentFactory(logger=self.logger, processing_delays={"vnpay": 0.25})

        self.assertEqual(factory.create_payment_method("VN_PAY").processing_delay, 0.25)
        self.assertEqual(factory.create_payment_method("CASH").processing_delay,
                         CashPayment.DEFAULT_PROCESSING_DELAY)

    def test_created_methods_share_factory_logger(self):
        payment = self.factory.create_payment_method("CASH")
        self.assertIs(payment.logger, self.logger)

    def test_payment_methods_info(self):
        """Method descriptions do not count as creations"""
        info = self.factory.get_payment_methods_info()

        self.assertEqual([method.type for method in info], ["CASH", "PAYPAL", "VNPAY"])
        self.assertEqual(self.factory.get_creation_statistics(), {})

    @patch.object(VNPayPayment, '__init__')
    @patch.object(PaypalPayment, '__init__')
    @patch.object(CashPayment, '__init__')
    def test_payment_methods_info_builds_no_instances(self, cash_init, paypal_init, vnpay_init):
        """Describing methods neither constructs them nor writes log entries"""
        self.logger.reset_mock()

        info = self.factory.get_payment_methods_info()

        self.assertEqual(len(info), 3)
        cash_init.assert_not_called()
        paypal_init.assert_not_called()
        vnpay_init.assert_not_called()
        self.logger.log_info.assert_not_called()

    def test_concurrent_creation_counts(self):
        """Counter updates from many threads are serialized"""
        def worker():
            for _ in range(50):
                self.factory.create_payment_method("CASH")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(self.factory.get_creation_statistics()["CASH"], 400)


if __name__ == '__main__':
    unittest.main()
