from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from storefront.domain.entities.payment_attempt import PaymentAttempt


class PaymentGatewayPort(ABC):
    @property
    @abstractmethod
    def attempt(self) -> PaymentAttempt:
        """Current attempt, including its status."""
        raise NotImplementedError

    @abstractmethod
    def open(self, amount: Decimal) -> None:
        """Start a fresh attempt in the input state for the given amount."""
        raise NotImplementedError

    @abstractmethod
    def submit(self, phone_number: str) -> None:
        """Move input -> processing. Raises PhoneNumberRequiredError on an empty number."""
        raise NotImplementedError

    @abstractmethod
    async def settle(self) -> PaymentAttempt:
        """Wait out processing and move to success with a transaction id."""
        raise NotImplementedError

    @abstractmethod
    async def hold_success(self) -> None:
        """Keep the success state visible before completion is reported."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Abandon the attempt. Only allowed in the input state."""
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """Return to input with all fields cleared, whatever the state."""
        raise NotImplementedError
