"""
Domain exceptions for purchases services.

Every purchase failure carries a stable ``code`` so callers can tell the
failure kinds apart without parsing messages.
"""


class PurchaseError(Exception):
    """Base exception for purchase processing."""

    code = 'purchase_error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PurchaseValidationError(PurchaseError):
    """Raised when a purchase request is malformed."""

    code = 'validation_error'


class ItemNotFoundError(PurchaseError):
    """Raised when a cart line references an item that doesn't exist."""

    code = 'item_not_found'

    def __init__(self, item_id):
        super().__init__(f"Item {item_id} not found.")
        self.item_id = item_id


class InsufficientStockError(PurchaseError):
    """Raised when an item has fewer units in stock than requested."""

    code = 'insufficient_stock'

    def __init__(self, item_id, item_name: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {item_name}. "
            f"Available: {available}, requested: {requested}."
        )
        self.item_id = item_id
        self.item_name = item_name
        self.available = available
        self.requested = requested


class StoreError(PurchaseError):
    """Raised when the database fails during a purchase; nothing was committed."""

    code = 'store_error'

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable


class DispatchRecordNotFoundError(PurchaseError):
    """Raised when dispatch record does not exist."""

    code = 'dispatch_record_not_found'
