"""Services for purchases business logic."""

from .exceptions import (
    PurchaseError,
    PurchaseValidationError,
    ItemNotFoundError,
    InsufficientStockError,
    StoreError,
    DispatchRecordNotFoundError,
)
from .types import (
    CartLine,
    CustomerDetails,
    PurchaseRequest,
)
from .purchase_processing import process_purchase
from .dispatch_management import (
    list_dispatch_records,
    update_dispatch_status,
)

__all__ = [
    # Exceptions
    'PurchaseError',
    'PurchaseValidationError',
    'ItemNotFoundError',
    'InsufficientStockError',
    'StoreError',
    'DispatchRecordNotFoundError',
    # Request types
    'CartLine',
    'CustomerDetails',
    'PurchaseRequest',
    # Purchase Processing
    'process_purchase',
    # Dispatch Management
    'list_dispatch_records',
    'update_dispatch_status',
]
