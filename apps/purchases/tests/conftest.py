import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from apps.inventory.models import Item, ItemCategory
from apps.purchases.models import DispatchRecord, DispatchLine, DispatchStatus
from apps.purchases.services import CartLine, CustomerDetails, PurchaseRequest


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def item_a(db):
    """Bicycle with five units in stock."""
    return Item.objects.create(
        name='Bike A',
        category=ItemCategory.BICYCLE,
        type='Urban',
        brand='Oxford',
        price=Decimal('100.00'),
        stock=5,
    )


@pytest.fixture
def item_b(db):
    """Part with no stock left."""
    return Item.objects.create(
        name='Part B',
        category=ItemCategory.PART,
        part_type='Chain',
        brand='Shimano',
        price=Decimal('50.00'),
        stock=0,
    )


@pytest.fixture
def customer():
    return CustomerDetails(
        name='Camila Rojas',
        email='camila@example.com',
        address='Av. Providencia 1234, Santiago',
    )


@pytest.fixture
def make_purchase(customer):
    """Build a PurchaseRequest from (item, quantity, unit price) tuples."""
    def _make(*lines, delivery_date=date(2026, 11, 2)):
        return PurchaseRequest(
            cart=tuple(
                CartLine(item_id=item.id, quantity=quantity, unit_price=Decimal(price))
                for item, quantity, price in lines
            ),
            delivery_date=delivery_date,
            customer=customer,
        )
    return _make


@pytest.fixture
def purchase_payload(item_a):
    """Valid POST body for a one-line checkout."""
    return {
        'cartItems': [
            {'itemId': str(item_a.id), 'quantity': 2, 'price': 100},
        ],
        'deliveryDate': '2026-11-02',
        'customerName': 'Camila Rojas',
        'customerEmail': 'camila@example.com',
        'customerAddress': 'Av. Providencia 1234, Santiago',
    }


@pytest.fixture
def dispatch_record(db, item_a):
    """A pending dispatch record with one line."""
    record = DispatchRecord.objects.create(
        total_amount=Decimal('200.00'),
        delivery_date=date(2026, 11, 2),
        customer_name='Diego Soto',
        customer_email='diego@example.com',
        status=DispatchStatus.PENDING,
    )
    DispatchLine.objects.create(
        record=record,
        position=0,
        item=item_a,
        name=item_a.name,
        quantity=2,
        price_at_purchase=Decimal('100.00'),
    )
    return record
