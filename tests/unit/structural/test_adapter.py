from decimal import Decimal
from unittest.mock import Mock

from pattern_catalog.structural.adapter import (
    ECommercePlatform,
    LegacyPaymentAdapter,
    LegacyPaymentProcessor,
    PaymentGateway,
    demo,
)


def test_adapter_converts_decimal_to_float():
    legacy = Mock(spec=LegacyPaymentProcessor)
    legacy.make_payment.return_value = "charged"
    adapter = LegacyPaymentAdapter(legacy)

    result = adapter.process_payment("4111", Decimal("123.50"))

    assert result == "charged"
    legacy.make_payment.assert_called_once_with("4111", 123.5)
    assert isinstance(legacy.make_payment.call_args[0][1], float)


def test_platform_checks_out_through_any_gateway():
    gateway = Mock(spec=PaymentGateway)
    gateway.process_payment.return_value = "ok"

    assert ECommercePlatform(gateway).checkout("4111", Decimal("10")) == "ok"
    gateway.process_payment.assert_called_once_with("4111", Decimal("10"))


def test_adapter_is_a_payment_gateway():
    assert isinstance(LegacyPaymentAdapter(LegacyPaymentProcessor()), PaymentGateway)


def test_demo_output():
    assert demo() == [
        "Processing payment",
        "Old Payment Processor charged 123.0 to card 123456-ashgd-45876",
    ]
