from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from tickets.domain.models import MAX_TICKETS_PER_PURCHASE, TicketType, TicketTypeRequest

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "MAX_TICKETS_PER_PURCHASE",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
]
