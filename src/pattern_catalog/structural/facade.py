"""Facade: one call places an order across inventory, payment, invoicing and shipping."""

from dataclasses import dataclass, field
from typing import List, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class PaymentsService:
    def process_payment(self, amount: float) -> str:
        return "Payment Done"


class InventoryService:
    def __init__(self, unavailable: Optional[List[str]] = None):
        self._unavailable = {name.lower() for name in unavailable or []}

    def is_product_available(self, product_name: str) -> bool:
        return product_name.lower() not in self._unavailable


class ShipmentService:
    def ship_product(self, product_name: str) -> str:
        return "Product Shipped..."


class InvoiceService:
    def generate_invoice(self, product_name: str, amount: float) -> str:
        return "Invoice generated"


@dataclass
class OrderReceipt:
    """Outcome of ``OrderFacade.place_order``."""

    product: str
    amount: float
    placed: bool
    steps: List[str] = field(default_factory=list)


class OrderFacade:
    """Single entry point over the order subsystems."""

    def __init__(
        self,
        payments: Optional[PaymentsService] = None,
        inventory: Optional[InventoryService] = None,
        shipments: Optional[ShipmentService] = None,
        invoices: Optional[InvoiceService] = None,
    ):
        self._payments = payments or PaymentsService()
        self._inventory = inventory or InventoryService()
        self._shipments = shipments or ShipmentService()
        self._invoices = invoices or InvoiceService()

    def place_order(self, product: str, amount: float) -> OrderReceipt:
        receipt = OrderReceipt(product=product, amount=amount, placed=False)
        if not self._inventory.is_product_available(product):
            logger.info("Order not placed, product unavailable", product=product)
            receipt.steps.append(f"Product {product} is not available")
            return receipt

        receipt.steps.append(f"Product {product} is available")
        receipt.steps.append(self._payments.process_payment(amount))
        receipt.steps.append(self._invoices.generate_invoice(product, amount))
        receipt.steps.append(self._shipments.ship_product(product))
        receipt.placed = True
        return receipt


def demo() -> List[str]:
    return OrderFacade().place_order("laptop", 55066.26).steps


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
