"""Inventory filtering service (equality predicates only)."""

from django.db.models import QuerySet
from typing import Optional

from ..models import Item, ItemCategory


def search_items(
    *,
    category: Optional[str] = None,
    brand: Optional[str] = None,
    type: Optional[str] = None,
    is_available_for_rent: Optional[bool] = None
) -> QuerySet[Item]:
    """
    Filter inventory items by exact field values.

    Args:
        category: 'Bicycle' or 'Part'
        brand: Exact brand name
        type: Exact item type
        is_available_for_rent: Rental availability flag

    Returns:
        Filtered QuerySet of Item
    """
    queryset = Item.objects.all()

    if category:
        queryset = queryset.filter(category=category)

    if brand:
        queryset = queryset.filter(brand=brand)

    if type:
        queryset = queryset.filter(type=type)

    if is_available_for_rent is not None:
        queryset = queryset.filter(is_available_for_rent=is_available_for_rent)

    return queryset


def get_rentable_bikes() -> QuerySet[Item]:
    """Bicycles flagged as available for rent."""
    return search_items(
        category=ItemCategory.BICYCLE,
        is_available_for_rent=True,
    )
