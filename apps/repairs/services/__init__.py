"""Services for repairs business logic."""

from .exceptions import (
    RepairsServiceError,
    RepairNotFoundError,
)
from .repair_orders import (
    create_repair,
    list_repairs,
    update_repair_status,
)

__all__ = [
    # Exceptions
    'RepairsServiceError',
    'RepairNotFoundError',
    # Repair Orders
    'create_repair',
    'list_repairs',
    'update_repair_status',
]
