"""In-memory gateways for tests that go through settings."""

from tickets.gateways import SeatReservationService, TicketPaymentService


class RecordingPaymentService(TicketPaymentService):
    def __init__(self) -> None:
        self.payments: list[tuple[int, int]] = []

    def make_payment(self, account_id: int, amount: int) -> None:
        self.payments.append((account_id, amount))


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self) -> None:
        self.reservations: list[tuple[int, int]] = []

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))
