"""Services for rentals business logic."""

from .exceptions import (
    RentalsServiceError,
    RentalNotFoundError,
)
from .rental_management import (
    create_rental,
    list_rentals,
    update_rental_status,
)

__all__ = [
    # Exceptions
    'RentalsServiceError',
    'RentalNotFoundError',
    # Rental Management
    'create_rental',
    'list_rentals',
    'update_rental_status',
]
