from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentStatus(str, Enum):
    input = "input"
    processing = "processing"
    success = "success"


@dataclass(frozen=True)
class PaymentAttempt:
    phone_number: str = ""
    status: PaymentStatus = PaymentStatus.input
    amount: Decimal = Decimal(0)
    transaction_id: str | None = None  # set only once status is success
