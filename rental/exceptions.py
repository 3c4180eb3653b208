"""Exception types raised by the rental domain."""


class RentalError(Exception):
    """Base class for rental desk errors."""

    def __init__(self, message: str = "Error: rental operation failed") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(RentalError):
    """Raised when an owner code fails validation."""

    def __init__(self, message: str = "Invalid owner code provided.") -> None:
        super().__init__(message)


class InvalidSelectionError(RentalError):
    """Raised when a rental selection has no vehicle attached."""

    def __init__(self, message: str = "Null vehicle passed to rental.") -> None:
        super().__init__(message)


class RentalRequestError(RentalError):
    """Raised by the session when a rental request is rejected before pricing."""
