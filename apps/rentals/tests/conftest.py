import pytest
from datetime import datetime, timezone
from decimal import Decimal
from rest_framework.test import APIClient
from apps.inventory.models import Item, ItemCategory
from apps.rentals.models import Rental, RentalStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def rental_bike(db):
    """A bicycle available for rent."""
    return Item.objects.create(
        name='Oxford Urbana',
        category=ItemCategory.BICYCLE,
        type='Urban',
        brand='Oxford',
        price=Decimal('320000.00'),
        stock=3,
        is_available_for_rent=True,
    )


@pytest.fixture
def active_rental(db, rental_bike):
    """An active weekend rental."""
    return Rental.objects.create(
        bike=rental_bike,
        bike_name=rental_bike.name,
        customer_name='Camila Rojas',
        customer_email='camila@example.com',
        start_date=datetime(2026, 7, 4, 10, 0, tzinfo=timezone.utc),
        end_date=datetime(2026, 7, 6, 18, 0, tzinfo=timezone.utc),
        total_price=Decimal('30000.00'),
        status=RentalStatus.ACTIVE,
    )


@pytest.fixture
def rental_payload(rental_bike):
    """Valid POST body for a new rental."""
    return {
        'bikeId': str(rental_bike.id),
        'bikeName': rental_bike.name,
        'customerName': 'Diego Soto',
        'customerEmail': 'diego@example.com',
        'startDate': '2026-08-01T09:00:00Z',
        'endDate': '2026-08-02T09:00:00Z',
        'totalPrice': 15000,
    }
