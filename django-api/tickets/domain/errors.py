"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum

from tickets.domain.models import MAX_TICKETS_PER_PURCHASE


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKET_REQUESTS = "NO_TICKET_REQUESTS"
    NO_ADULT_TICKET = "NO_ADULT_TICKET"
    NOT_ENOUGH_ADULTS = "NOT_ENOUGH_ADULTS"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"


REJECTION_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_ACCOUNT_ID: "Account id must be defined and be greater than 0",
    ErrorCode.NO_TICKET_REQUESTS: "At least one ticket request must be specified",
    ErrorCode.NO_ADULT_TICKET: "Tickets can not be purchased without an adult ticket",
    ErrorCode.NOT_ENOUGH_ADULTS: "There are not enough adults for infants to sit on",
    ErrorCode.TOO_MANY_TICKETS: (
        f"Number of tickets to purchase exceeds {MAX_TICKETS_PER_PURCHASE}"
    ),
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase breaks one of the ticket rules."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code=code, message=REJECTION_MESSAGES[code])
