"""Dispatch record listing and status service."""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from ..models import DispatchRecord
from .exceptions import DispatchRecordNotFoundError

logger = logging.getLogger(__name__)


def list_dispatch_records() -> QuerySet[DispatchRecord]:
    """All dispatch records with their lines, newest first."""
    return DispatchRecord.objects.prefetch_related('lines').order_by('-created_at')


@transaction.atomic
def update_dispatch_status(*, record_id: UUID, status: str) -> DispatchRecord:
    """
    Move a dispatch record to another status.

    Line snapshots and totals are never touched.

    Raises:
        DispatchRecordNotFoundError: If dispatch record doesn't exist
    """
    try:
        record = DispatchRecord.objects.select_for_update().get(id=record_id)
    except DispatchRecord.DoesNotExist:
        raise DispatchRecordNotFoundError(f"Dispatch record {record_id} not found")

    previous = record.status
    record.status = status
    record.save(update_fields=['status'])
    logger.info("Dispatch record %s moved from %s to %s", record.id, previous, status)
    return record
