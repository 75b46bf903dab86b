"""
Purchase Processing Service
===========================

Turns a validated purchase request into stock decrements plus a dispatch
record, as one atomic unit of work.

Either every cart line is checked, its item's stock decremented and the
dispatch record written, or nothing is: the first failing line aborts the
transaction and the database is left exactly as it was.

Example:
    Processing a two-line cart::

        from datetime import date
        from decimal import Decimal
        from apps.purchases.services import (
            CartLine, CustomerDetails, PurchaseRequest, process_purchase,
        )

        purchase = PurchaseRequest(
            cart=(
                CartLine(item_id=bike.id, quantity=1, unit_price=Decimal('450000.00')),
                CartLine(item_id=pads.id, quantity=2, unit_price=Decimal('8990.00')),
            ),
            delivery_date=date(2026, 11, 2),
            customer=CustomerDetails(name='Camila Rojas', email='camila@example.com'),
        )
        record = process_purchase(purchase=purchase)
"""

import logging

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, DatabaseError, OperationalError, connections, transaction

from apps.inventory.models import Item
from ..models import DispatchLine, DispatchRecord, DispatchStatus
from .exceptions import (
    InsufficientStockError,
    ItemNotFoundError,
    PurchaseValidationError,
    StoreError,
)
from .types import PurchaseRequest

logger = logging.getLogger(__name__)


def process_purchase(
    *,
    purchase: PurchaseRequest,
    using: str = DEFAULT_DB_ALIAS,
    timeout_ms: int | None = None
) -> DispatchRecord:
    """
    Deduct stock for every cart line and record the dispatch, atomically.

    Cart lines are processed in the order given. For each line the item is
    looked up, its stock checked against the requested quantity and then
    decremented. Several lines for the same item accumulate: the later line
    sees the stock left by the earlier one. Processing stops at the first
    failing line and the whole transaction is rolled back.

    The dispatch record snapshots each line with the item name as read and
    the unit price the caller submitted, not the catalog price. Its total
    is the sum of quantity times unit price, and it starts as Pending.

    Requests are not deduplicated: submitting the same request twice
    decrements stock twice and creates two records.

    Args:
        purchase (PurchaseRequest): Validated purchase request.
        using (str, optional): Database alias the transaction runs on.
            Defaults to the default database.
        timeout_ms (int, optional): Upper bound for statements and lock
            waits inside the transaction, in milliseconds. Defaults to
            ``settings.PURCHASE_TRANSACTION_TIMEOUT_MS``. Only enforced on
            PostgreSQL.

    Returns:
        DispatchRecord: The committed dispatch record.

    Raises:
        PurchaseValidationError: If ``purchase`` is not a PurchaseRequest.
        ItemNotFoundError: If a cart line references an unknown item.
        InsufficientStockError: If an item has fewer units than requested.
        StoreError: If the database fails or times out. ``retryable`` is
            set for operational failures such as timeouts and lock errors.

    Note:
        All referenced items are locked with ``SELECT ... FOR UPDATE`` in
        primary key order before any of them is checked, so concurrent
        purchases cannot both take the last unit of an item and cannot
        deadlock on each other.
    """
    if not isinstance(purchase, PurchaseRequest):
        raise PurchaseValidationError("A PurchaseRequest is required")

    if timeout_ms is None:
        timeout_ms = settings.PURCHASE_TRANSACTION_TIMEOUT_MS

    try:
        with transaction.atomic(using=using):
            _bound_transaction(using, timeout_ms)
            record = _deduct_and_record(purchase, using)
    except (ItemNotFoundError, InsufficientStockError) as exc:
        logger.warning("Purchase rejected for %s: %s", purchase.customer.email, exc.message)
        raise
    except OperationalError as exc:
        logger.exception("Purchase aborted by an operational database error")
        raise StoreError(
            "The purchase could not be completed right now. Please try again.",
            retryable=True,
        ) from exc
    except DatabaseError as exc:
        logger.exception("Purchase aborted by a database error")
        raise StoreError("The purchase could not be saved.") from exc

    logger.info(
        "Purchase committed: dispatch record %s, %d line(s), total %s",
        record.id, len(purchase.cart), record.total_amount
    )
    return record


def _bound_transaction(using, timeout_ms):
    """Limit statement and lock wait time for the rest of the transaction."""
    connection = connections[using]
    if connection.vendor != 'postgresql' or not timeout_ms or timeout_ms <= 0:
        return

    with connection.cursor() as cursor:
        # set_config(..., true) is the parameterisable form of SET LOCAL
        cursor.execute(
            "SELECT set_config('statement_timeout', %s, true), "
            "set_config('lock_timeout', %s, true)",
            [str(int(timeout_ms)), str(int(timeout_ms))]
        )


def _deduct_and_record(purchase, using):
    items = _lock_items(purchase, using)

    for line in purchase.cart:
        item = items.get(line.item_id)
        if item is None:
            raise ItemNotFoundError(line.item_id)

        if not item.has_stock_for(line.quantity):
            raise InsufficientStockError(
                item_id=item.id,
                item_name=item.name,
                available=item.stock,
                requested=line.quantity,
            )

        item.stock -= line.quantity
        item.save(using=using, update_fields=['stock', 'updated_at'])

    record = DispatchRecord.objects.using(using).create(
        total_amount=purchase.total_amount,
        delivery_date=purchase.delivery_date,
        customer_name=purchase.customer.name,
        customer_email=purchase.customer.email,
        customer_address=purchase.customer.address,
        status=DispatchStatus.PENDING,
    )
    DispatchLine.objects.using(using).bulk_create([
        DispatchLine(
            record=record,
            position=position,
            item_id=line.item_id,
            name=items[line.item_id].name,
            quantity=line.quantity,
            price_at_purchase=line.unit_price,
        )
        for position, line in enumerate(purchase.cart)
    ])
    return record


def _lock_items(purchase, using):
    """Lock every referenced item, in primary key order, and index them by id."""
    item_ids = {line.item_id for line in purchase.cart}
    locked = (
        Item.objects.using(using)
        .select_for_update()
        .filter(id__in=item_ids)
        .order_by('id')
    )
    return {item.id: item for item in locked}
