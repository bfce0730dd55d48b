"""Transaction ledger entries.

Every status change of an order leaves one immutable Transaction behind.
Transactions are append-only: nothing in the system updates or removes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from lunches.domain.exceptions import ValidationError
from lunches.domain.model.value_objects import Money


class TransactionType(Enum):
    PAYMENT = "payment"
    CANCELLATION = "cancellation"
    REJECTION = "rejection"


@dataclass(frozen=True)
class Transaction:
    order_id: int | None
    type: TransactionType
    amount: Money
    created_at: datetime
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.type != TransactionType.PAYMENT and not self.reason:
            raise ValidationError(
                f"A reason is required for a {self.type.value} transaction"
            )
