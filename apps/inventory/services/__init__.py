"""Services for inventory queries."""

from .item_search import (
    search_items,
    get_rentable_bikes,
)

__all__ = [
    'search_items',
    'get_rentable_bikes',
]
