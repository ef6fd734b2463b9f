"""
Observer: apps subscribe to a stock and are pushed every price change.

Observers are notified in registration order, after the price is updated.
"""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.infrastructure.logging.logger import get_logger


class StockObserver(ABC):
    @abstractmethod
    def update(self, price: float) -> str:
        """Receive the new price and return the notification text."""
        pass


class MobileApp(StockObserver):
    def update(self, price: float) -> str:
        return f"Mobile App Notified : Stock Price updated with ${price}"


class EmailApp(StockObserver):
    def update(self, price: float) -> str:
        return f"Email App Notified : Stock Price updated with ${price}"


class Stock:
    """Subject holding a price and its observers."""

    def __init__(self, price: float = 0.0):
        self._observers: List[StockObserver] = []
        self._price = price
        self._logger = get_logger(__name__)

    @property
    def price(self) -> float:
        return self._price

    @property
    def observers(self) -> List[StockObserver]:
        return list(self._observers)

    def register(self, observer: StockObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)
            self._logger.debug("Registered observer", observer=type(observer).__name__)

    def unregister(self, observer: StockObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
            self._logger.debug("Unregistered observer", observer=type(observer).__name__)

    def set_price(self, price: float) -> List[str]:
        self._price = price
        return self.notify()

    def notify(self) -> List[str]:
        self._logger.debug(
            "Notifying observers", observer_count=len(self._observers), price=self._price
        )
        return [observer.update(self._price) for observer in self._observers]


def demo() -> List[str]:
    stock = Stock()
    mobile_app = MobileApp()
    stock.register(mobile_app)
    stock.register(EmailApp())

    lines = stock.set_price(300.45)
    lines.extend(stock.set_price(310.25))
    stock.unregister(mobile_app)
    lines.extend(stock.set_price(320.0))
    return lines


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
