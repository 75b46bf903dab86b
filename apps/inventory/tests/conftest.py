import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.inventory.models import Item, ItemCategory


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def mountain_bike(db):
    """A bicycle that can be rented."""
    return Item.objects.create(
        name='Trek Marlin 5',
        category=ItemCategory.BICYCLE,
        type='Mountain',
        brand='Trek',
        price=Decimal('650000.00'),
        stock=4,
        is_available_for_rent=True,
    )


@pytest.fixture
def road_bike(db):
    """A bicycle that is for sale only."""
    return Item.objects.create(
        name='Specialized Allez',
        category=ItemCategory.BICYCLE,
        type='Road',
        brand='Specialized',
        price=Decimal('900000.00'),
        stock=2,
        is_available_for_rent=False,
    )


@pytest.fixture
def brake_pads(db):
    """A spare part."""
    return Item.objects.create(
        name='Shimano B01S brake pads',
        category=ItemCategory.PART,
        type='Brakes',
        brand='Shimano',
        price=Decimal('8990.00'),
        stock=30,
        part_type='Brakes',
        compatibility='Shimano Deore, Alivio',
    )
