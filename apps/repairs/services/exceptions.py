"""Domain-specific exceptions for repairs services."""


class RepairsServiceError(Exception):
    """Base exception for repairs services."""
    pass


class RepairNotFoundError(RepairsServiceError):
    """Raised when repair order does not exist."""
    pass
