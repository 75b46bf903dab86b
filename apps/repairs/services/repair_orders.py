"""Repair order intake and status service."""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from ..models import Repair, RepairStatus
from .exceptions import RepairNotFoundError

logger = logging.getLogger(__name__)


def create_repair(
    *,
    bike_type: str,
    problem_description: str,
    customer_name: str,
    customer_email: str,
    bike_brand: str = ''
) -> Repair:
    """
    Open a repair order; new orders wait as Pending.

    Returns:
        Created Repair instance
    """
    repair = Repair.objects.create(
        bike_type=bike_type,
        bike_brand=bike_brand,
        problem_description=problem_description,
        customer_name=customer_name,
        customer_email=customer_email,
        status=RepairStatus.PENDING,
    )
    logger.info("Repair order %s opened for %s", repair.id, customer_email)
    return repair


def list_repairs() -> QuerySet[Repair]:
    """All repair orders, newest first."""
    return Repair.objects.order_by('-created_at')


@transaction.atomic
def update_repair_status(*, repair_id: UUID, status: str) -> Repair:
    """
    Move a repair order to another status.

    Raises:
        RepairNotFoundError: If repair order doesn't exist
    """
    try:
        repair = Repair.objects.select_for_update().get(id=repair_id)
    except Repair.DoesNotExist:
        raise RepairNotFoundError(f"Repair {repair_id} not found")

    repair.status = status
    repair.save(update_fields=['status'])
    logger.info("Repair order %s is now %s", repair.id, status)
    return repair
