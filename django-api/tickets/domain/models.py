"""Domain models for a ticket purchase.

These are pure domain objects with no API input rules.
"""

from dataclasses import dataclass
from enum import Enum

MAX_TICKETS_PER_PURCHASE = 20


class TicketType(Enum):
    """Ticket types on sale."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def takes_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT


TICKET_PRICES: dict[TicketType, int] = {
    TicketType.ADULT: 20,
    TicketType.CHILD: 10,
    TicketType.INFANT: 0,
}


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for `quantity` tickets of one type."""

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError("Unknown ticket type")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Ticket quantity must be an integer")
        if self.quantity < 0:
            raise ValueError("Ticket quantity cannot be negative")
