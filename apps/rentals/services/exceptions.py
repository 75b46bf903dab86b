"""Domain-specific exceptions for rentals services."""


class RentalsServiceError(Exception):
    """Base exception for rentals services."""
    pass


class RentalNotFoundError(RentalsServiceError):
    """Raised when rental does not exist."""
    pass
