"""Rental booking and status service."""

import logging
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.inventory.models import Item
from ..models import Rental, RentalStatus
from .exceptions import RentalNotFoundError

logger = logging.getLogger(__name__)


def create_rental(
    *,
    bike: Item,
    bike_name: str,
    customer_name: str,
    customer_email: str,
    start_date: datetime,
    end_date: datetime,
    total_price: Decimal
) -> Rental:
    """
    Register a new rental; it always starts as Active.

    Returns:
        Created Rental instance
    """
    rental = Rental.objects.create(
        bike=bike,
        bike_name=bike_name,
        customer_name=customer_name,
        customer_email=customer_email,
        start_date=start_date,
        end_date=end_date,
        total_price=total_price,
        status=RentalStatus.ACTIVE,
    )
    logger.info("Rental %s registered for bike %s", rental.id, bike.id)
    return rental


def list_rentals() -> QuerySet[Rental]:
    """All rentals, newest first."""
    return Rental.objects.order_by('-created_at')


@transaction.atomic
def update_rental_status(*, rental_id: UUID, status: str) -> Rental:
    """
    Change the status of a rental.

    Raises:
        RentalNotFoundError: If rental doesn't exist
    """
    try:
        rental = Rental.objects.select_for_update().get(id=rental_id)
    except Rental.DoesNotExist:
        raise RentalNotFoundError(f"Rental {rental_id} not found")

    rental.status = status
    rental.save(update_fields=['status'])
    return rental
