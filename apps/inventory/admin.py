from django.contrib import admin
from .models import Item


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    """Admin interface for inventory items."""

    list_display = [
        'name',
        'category',
        'brand',
        'type',
        'price',
        'stock',
        'is_available_for_rent',
        'updated_at',
    ]
    list_filter = [
        'category',
        'is_available_for_rent',
        'brand',
    ]
    list_editable = ['stock', 'is_available_for_rent']
    search_fields = [
        'name',
        'brand',
        'type',
        'part_type',
        'compatibility',
    ]
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['name']
