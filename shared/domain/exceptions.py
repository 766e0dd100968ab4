"""
Domain Errors

Every business-rule violation raised by the booking and wallet workflows
derives from DomainError. Views translate them into ``{"error": ...}``
responses using ``status_code``.
"""


class DomainError(Exception):
    """Base class for errors that are reported to the client."""

    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(DomainError):
    default_message = "Invalid input"


class RoomUnavailable(DomainError):
    default_message = "Room is not available for selected dates"


class InsufficientBalance(DomainError):
    default_message = "Insufficient balance"


class AlreadyCancelled(DomainError):
    default_message = "Booking is already cancelled"


class SelfTransfer(DomainError):
    default_message = "Cannot transfer to yourself"


class NotFound(DomainError):
    status_code = 404
    default_message = "Not found"


class Unauthorized(DomainError):
    status_code = 403
    default_message = "Unauthorized"


class TransactionAborted(DomainError):
    """Unexpected failure inside an atomic unit; nothing was persisted."""

    status_code = 500
    default_message = "Transaction aborted"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)


class BookingCreationFailed(TransactionAborted):
    default_message = "Booking creation failed"
