"""Strategy: the payment method is chosen at runtime and swapped freely."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.domain.core.exceptions import StrategyNotSelectedError


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: float) -> str:
        pass


class UpiPayment(PaymentStrategy):
    def pay(self, amount: float) -> str:
        return f"Payment of amount {amount} done through UPI payments"


class CreditCardPayment(PaymentStrategy):
    def pay(self, amount: float) -> str:
        return f"Payment of amount {amount} done through Credit card"


class PaymentContext:
    def __init__(self, strategy: Optional[PaymentStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[PaymentStrategy]:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    def process_payment(self, amount: float) -> str:
        if self._strategy is None:
            raise StrategyNotSelectedError("No payment strategy selected")
        return self._strategy.pay(amount)


def demo() -> List[str]:
    context = PaymentContext()
    context.set_strategy(UpiPayment())
    upi = context.process_payment(135000.232)
    context.set_strategy(CreditCardPayment())
    return [upi, context.process_payment(1350000.232)]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
