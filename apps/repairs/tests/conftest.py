import pytest
from rest_framework.test import APIClient
from apps.repairs.models import Repair, RepairStatus


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def pending_repair(db):
    """A freshly opened repair order."""
    return Repair.objects.create(
        bike_type='Mountain',
        bike_brand='Trek',
        problem_description='Rear derailleur skips under load',
        customer_name='Valentina Muñoz',
        customer_email='valentina@example.com',
        status=RepairStatus.PENDING,
    )
