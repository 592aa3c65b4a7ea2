"""Collaborator interfaces.

Gateways must be swappable. The purchase service depends only on these.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for the payment gateway."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` to the account."""
        ...


class SeatReservationService(ABC):
    """Interface for the seat booking system."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the account."""
        ...
