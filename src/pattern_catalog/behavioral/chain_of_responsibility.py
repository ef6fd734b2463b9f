"""
Chain of Responsibility: loan requests pass up a chain of approvers.

Each approver either handles the request or passes it to its successor. The
last approver rejects anything it cannot approve, so every request ends with
an explicit outcome.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from pattern_catalog.config.schemas import LoanApprovalConfig
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

REJECTION_MESSAGE = "Sorry, we cannot process your loan for now"


@dataclass(frozen=True)
class ApprovalOutcome:
    amount: float
    approved: bool
    approver: Optional[str]
    message: str


class Approver(ABC):
    """A link in the approval chain."""

    title: str = ""

    def __init__(self):
        self._next_approver: Optional["Approver"] = None

    @property
    def next_approver(self) -> Optional["Approver"]:
        return self._next_approver

    def set_next(self, approver: "Approver") -> "Approver":
        """Set the successor and return it, so chains can be built fluently."""
        self._next_approver = approver
        return approver

    def process_request(self, amount: float) -> ApprovalOutcome:
        if self.can_approve(amount):
            logger.debug("Loan approved", approver=self.title, amount=amount)
            return ApprovalOutcome(
                amount=amount,
                approved=True,
                approver=self.title,
                message=f"Loan Approved by {self.title}",
            )
        if self._next_approver is not None:
            return self._next_approver.process_request(amount)
        return self._reject(amount)

    def _reject(self, amount: float) -> ApprovalOutcome:
        logger.info("Loan rejected", last_approver=self.title, amount=amount)
        return ApprovalOutcome(
            amount=amount, approved=False, approver=None, message=REJECTION_MESSAGE
        )

    @abstractmethod
    def can_approve(self, amount: float) -> bool:
        pass


class Clerk(Approver):
    title = "Clerk"

    def __init__(self, limit: float = 10000):
        super().__init__()
        self.limit = limit

    def can_approve(self, amount: float) -> bool:
        return amount < self.limit


class SeniorClerk(Approver):
    title = "Senior Clerk"

    def __init__(self, limit: float = 30000):
        super().__init__()
        self.limit = limit

    def can_approve(self, amount: float) -> bool:
        return amount < self.limit


class LoanManager(Approver):
    """Final approver: approves amounts above its threshold, rejects the rest."""

    title = "Loan Manager"

    def __init__(self, threshold: float = 30000):
        super().__init__()
        self.threshold = threshold

    def can_approve(self, amount: float) -> bool:
        return amount > self.threshold


def build_approval_chain(config: Optional[LoanApprovalConfig] = None) -> Approver:
    """Build Clerk -> Senior Clerk -> Loan Manager and return the first link."""
    config = config or LoanApprovalConfig()
    clerk = Clerk(config.clerk_limit)
    clerk.set_next(SeniorClerk(config.senior_clerk_limit)).set_next(
        LoanManager(config.senior_clerk_limit)
    )
    return clerk


def demo(config: Optional[LoanApprovalConfig] = None) -> List[str]:
    chain = build_approval_chain(config)
    return [chain.process_request(amount).message for amount in (9000, 20000, 50000, 30000)]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
