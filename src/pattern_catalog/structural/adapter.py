"""Adapter: lets a legacy float-based payment processor serve a Decimal-based gateway interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class PaymentGateway(ABC):
    """Interface the e-commerce platform expects."""

    @abstractmethod
    def process_payment(self, card_number: str, amount: Decimal) -> str:
        pass


class LegacyPaymentProcessor:
    """Existing processor with an incompatible signature."""

    def make_payment(self, card_number: str, amount: float) -> str:
        return f"Old Payment Processor charged {amount} to card {card_number}"


class LegacyPaymentAdapter(PaymentGateway):
    """Exposes a ``LegacyPaymentProcessor`` as a ``PaymentGateway``."""

    def __init__(self, legacy_processor: LegacyPaymentProcessor):
        self._legacy_processor = legacy_processor

    def process_payment(self, card_number: str, amount: Decimal) -> str:
        amount_as_float = float(amount)
        logger.debug("Adapting payment for legacy processor", amount=amount_as_float)
        return self._legacy_processor.make_payment(card_number, amount_as_float)


class ECommercePlatform:
    def __init__(self, payment_gateway: PaymentGateway):
        self._payment_gateway = payment_gateway

    def checkout(self, card_number: str, amount: Decimal) -> str:
        return self._payment_gateway.process_payment(card_number, amount)


def demo() -> List[str]:
    platform = ECommercePlatform(LegacyPaymentAdapter(LegacyPaymentProcessor()))
    return [
        "Processing payment",
        platform.checkout("123456-ashgd-45876", Decimal("123")),
    ]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
