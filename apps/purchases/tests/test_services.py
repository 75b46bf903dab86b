import pytest
import threading
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest import mock
from uuid import uuid4
from django.db import DatabaseError, IntegrityError, OperationalError, connection, connections
from django.db.models.query import QuerySet
from django.test.utils import CaptureQueriesContext
from apps.inventory.models import Item
from apps.purchases.models import DispatchRecord, DispatchStatus
from apps.purchases.services import (
    CartLine,
    PurchaseRequest,
    PurchaseValidationError,
    ItemNotFoundError,
    InsufficientStockError,
    StoreError,
    DispatchRecordNotFoundError,
    process_purchase,
    list_dispatch_records,
    update_dispatch_status,
)
from apps.purchases.services.purchase_processing import _bound_transaction


@pytest.mark.django_db
class TestProcessPurchase:
    """Tests for process_purchase"""

    def test_out_of_stock_line_aborts_everything(self, make_purchase, item_a, item_b):
        purchase = make_purchase((item_a, 2, '100.00'), (item_b, 1, '50.00'))

        with pytest.raises(InsufficientStockError) as exc_info:
            process_purchase(purchase=purchase)

        error = exc_info.value
        assert error.code == 'insufficient_stock'
        assert error.item_id == item_b.id
        assert error.available == 0
        assert error.requested == 1
        assert 'Part B' in error.message
        assert '0' in error.message

        item_a.refresh_from_db()
        item_b.refresh_from_db()
        assert item_a.stock == 5
        assert item_b.stock == 0
        assert not DispatchRecord.objects.exists()

    def test_sufficient_stock_commits(self, make_purchase, item_a, item_b):
        item_b.stock = 3
        item_b.save()
        purchase = make_purchase((item_a, 2, '100.00'), (item_b, 1, '50.00'))

        record = process_purchase(purchase=purchase)

        item_a.refresh_from_db()
        item_b.refresh_from_db()
        assert item_a.stock == 3
        assert item_b.stock == 2
        assert record.total_amount == Decimal('250.00')
        assert record.status == DispatchStatus.PENDING
        assert DispatchRecord.objects.count() == 1

    def test_record_snapshots_lines_in_cart_order(self, make_purchase, item_a, item_b):
        item_b.stock = 3
        item_b.save()
        purchase = make_purchase((item_b, 1, '50.00'), (item_a, 2, '100.00'))

        record = process_purchase(purchase=purchase)

        lines = list(record.lines.all())
        assert [(l.item_id, l.name, l.quantity, l.price_at_purchase) for l in lines] == [
            (item_b.id, 'Part B', 1, Decimal('50.00')),
            (item_a.id, 'Bike A', 2, Decimal('100.00')),
        ]
        assert record.calculate_total() == record.total_amount

    def test_customer_details_are_copied(self, make_purchase, item_a):
        record = process_purchase(purchase=make_purchase((item_a, 1, '100.00')))

        assert record.customer_name == 'Camila Rojas'
        assert record.customer_email == 'camila@example.com'
        assert record.customer_address == 'Av. Providencia 1234, Santiago'
        assert record.delivery_date == date(2026, 11, 2)

    def test_submitted_price_wins_over_catalog_price(self, make_purchase, item_a):
        record = process_purchase(purchase=make_purchase((item_a, 1, '79.90')))

        item_a.refresh_from_db()
        assert item_a.price == Decimal('100.00')
        assert record.lines.get().price_at_purchase == Decimal('79.90')
        assert record.total_amount == Decimal('79.90')

    def test_replay_decrements_twice(self, make_purchase, item_a):
        purchase = make_purchase((item_a, 2, '100.00'))

        first = process_purchase(purchase=purchase)
        second = process_purchase(purchase=purchase)

        item_a.refresh_from_db()
        assert item_a.stock == 1
        assert first.id != second.id
        assert DispatchRecord.objects.count() == 2

    def test_exact_stock_reaches_zero(self, make_purchase, item_a):
        process_purchase(purchase=make_purchase((item_a, 5, '100.00')))

        item_a.refresh_from_db()
        assert item_a.stock == 0

    def test_repeated_item_lines_accumulate(self, make_purchase, item_a):
        item_a.stock = 3
        item_a.save()
        purchase = make_purchase((item_a, 2, '100.00'), (item_a, 2, '100.00'))

        with pytest.raises(InsufficientStockError) as exc_info:
            process_purchase(purchase=purchase)

        # The second line sees what the first one left
        assert exc_info.value.available == 1
        assert exc_info.value.requested == 2
        item_a.refresh_from_db()
        assert item_a.stock == 3

    def test_repeated_item_lines_within_stock(self, make_purchase, item_a):
        record = process_purchase(
            purchase=make_purchase((item_a, 2, '100.00'), (item_a, 3, '90.00'))
        )

        item_a.refresh_from_db()
        assert item_a.stock == 0
        assert record.lines.count() == 2
        assert record.total_amount == Decimal('470.00')

    def test_unknown_item_rolls_back(self, customer, item_a):
        missing_id = uuid4()
        purchase = PurchaseRequest(
            cart=(
                CartLine(item_id=item_a.id, quantity=2, unit_price=Decimal('100.00')),
                CartLine(item_id=missing_id, quantity=1, unit_price=Decimal('10.00')),
            ),
            delivery_date=date(2026, 11, 2),
            customer=customer,
        )

        with pytest.raises(ItemNotFoundError) as exc_info:
            process_purchase(purchase=purchase)

        assert exc_info.value.item_id == missing_id
        assert exc_info.value.code == 'item_not_found'
        item_a.refresh_from_db()
        assert item_a.stock == 5
        assert not DispatchRecord.objects.exists()

    def test_first_failing_line_is_reported(self, customer, item_a, item_b):
        purchase = PurchaseRequest(
            cart=(
                CartLine(item_id=uuid4(), quantity=1, unit_price=Decimal('10.00')),
                CartLine(item_id=item_b.id, quantity=1, unit_price=Decimal('50.00')),
            ),
            delivery_date=date(2026, 11, 2),
            customer=customer,
        )

        with pytest.raises(ItemNotFoundError):
            process_purchase(purchase=purchase)

    def test_rejects_untyped_request(self):
        with pytest.raises(PurchaseValidationError):
            process_purchase(purchase={'cartItems': []})

    def test_operational_error_is_retryable(self, make_purchase, item_a):
        with mock.patch.object(QuerySet, 'bulk_create', side_effect=OperationalError('lock timeout')):
            with pytest.raises(StoreError) as exc_info:
                process_purchase(purchase=make_purchase((item_a, 2, '100.00')))

        assert exc_info.value.retryable is True
        assert exc_info.value.code == 'store_error'
        item_a.refresh_from_db()
        assert item_a.stock == 5
        assert not DispatchRecord.objects.exists()

    def test_integrity_error_is_not_retryable(self, make_purchase, item_a):
        with mock.patch.object(QuerySet, 'bulk_create', side_effect=IntegrityError('constraint failed')):
            with pytest.raises(StoreError) as exc_info:
                process_purchase(purchase=make_purchase((item_a, 2, '100.00')))

        assert exc_info.value.retryable is False
        assert isinstance(exc_info.value.__cause__, DatabaseError)
        item_a.refresh_from_db()
        assert item_a.stock == 5

    def test_timeout_is_ignored_outside_postgresql(self, make_purchase, item_a):
        record = process_purchase(purchase=make_purchase((item_a, 1, '100.00')), timeout_ms=1)

        assert record.status == DispatchStatus.PENDING

    def test_items_locked_in_one_ordered_query(self, make_purchase, item_a, item_b):
        item_b.stock = 3
        item_b.save()
        purchase = make_purchase((item_b, 1, '50.00'), (item_a, 2, '100.00'))
        original = QuerySet.select_for_update

        with mock.patch.object(QuerySet, 'select_for_update', autospec=True, side_effect=original) as locking:
            with CaptureQueriesContext(connection) as ctx:
                process_purchase(purchase=purchase)

        locking.assert_called_once()
        item_reads = [
            query['sql'] for query in ctx.captured_queries
            if query['sql'].startswith('SELECT') and '"inventory_items"' in query['sql']
        ]
        assert len(item_reads) == 1
        assert item_a.id.hex in item_reads[0]
        assert item_b.id.hex in item_reads[0]
        assert 'ORDER BY "inventory_items"."id" ASC' in item_reads[0]

    def test_deleting_item_keeps_dispatch_snapshot(self, make_purchase, item_a):
        record = process_purchase(purchase=make_purchase((item_a, 1, '100.00')))
        item_id = item_a.id

        Item.objects.filter(id=item_id).delete()

        line = DispatchRecord.objects.get(id=record.id).lines.get()
        assert line.item_id == item_id
        assert line.name == 'Bike A'


@pytest.mark.django_db
class TestDispatchManagement:

    def test_list_newest_first(self, make_purchase, item_a):
        older = process_purchase(purchase=make_purchase((item_a, 1, '100.00')))
        newer = process_purchase(purchase=make_purchase((item_a, 1, '100.00')))
        DispatchRecord.objects.filter(id=older.id).update(created_at=datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc))
        DispatchRecord.objects.filter(id=newer.id).update(created_at=datetime(2026, 10, 1, 9, 5, tzinfo=timezone.utc))

        assert [r.id for r in list_dispatch_records()] == [newer.id, older.id]

    def test_update_status(self, dispatch_record):
        record = update_dispatch_status(
            record_id=dispatch_record.id,
            status=DispatchStatus.IN_DISPATCH
        )

        assert record.status == DispatchStatus.IN_DISPATCH
        dispatch_record.refresh_from_db()
        assert dispatch_record.status == DispatchStatus.IN_DISPATCH
        assert dispatch_record.total_amount == Decimal('200.00')

    def test_update_unknown_record(self):
        with pytest.raises(DispatchRecordNotFoundError):
            update_dispatch_status(record_id=uuid4(), status=DispatchStatus.DELIVERED)


class TestTransactionBound:
    """Tests for the PostgreSQL statement and lock timeouts"""

    def test_sets_local_timeouts_on_postgresql(self):
        conn = connections['default']
        with mock.patch.object(conn, 'vendor', 'postgresql'), \
                mock.patch.object(conn, 'cursor') as cursor:
            _bound_transaction('default', 2500)

        execute = cursor.return_value.__enter__.return_value.execute
        execute.assert_called_once()
        sql, params = execute.call_args.args
        assert "set_config('statement_timeout', %s, true)" in sql
        assert "set_config('lock_timeout', %s, true)" in sql
        assert params == ['2500', '2500']

    @pytest.mark.parametrize('timeout_ms', [None, 0, -5])
    def test_no_bound_without_positive_timeout(self, timeout_ms):
        conn = connections['default']
        with mock.patch.object(conn, 'vendor', 'postgresql'), \
                mock.patch.object(conn, 'cursor') as cursor:
            _bound_transaction('default', timeout_ms)

        cursor.assert_not_called()

    def test_other_backends_are_not_bounded(self):
        conn = connections['default']
        with mock.patch.object(conn, 'vendor', 'sqlite'), \
                mock.patch.object(conn, 'cursor') as cursor:
            _bound_transaction('default', 2500)

        cursor.assert_not_called()


@pytest.mark.django_db(transaction=True)
class TestConcurrentPurchases:
    """Two checkouts racing for the last unit of an item"""

    def test_last_unit_is_sold_once(self, make_purchase, item_a):
        item_a.stock = 1
        item_a.save()
        purchase = make_purchase((item_a, 1, '100.00'))
        start = threading.Barrier(2)
        outcomes = []

        def checkout():
            try:
                start.wait(timeout=10)
                outcomes.append(process_purchase(purchase=purchase))
            except (InsufficientStockError, StoreError) as exc:
                outcomes.append(exc)
            finally:
                connections.close_all()

        threads = [threading.Thread(target=checkout) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        assert len(outcomes) == 2
        sold = [o for o in outcomes if isinstance(o, DispatchRecord)]
        rejected = [o for o in outcomes if not isinstance(o, DispatchRecord)]
        assert len(sold) <= 1
        for error in rejected:
            assert isinstance(error, InsufficientStockError) or error.retryable

        item_a.refresh_from_db()
        assert item_a.stock == 1 - len(sold)
        assert item_a.stock >= 0
        assert DispatchRecord.objects.count() == len(sold)
