from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class ItemCategory(models.TextChoices):
    BICYCLE = 'Bicycle', 'Bicycle'
    PART = 'Part', 'Part'


class Item(models.Model):
    """Inventory item: a bicycle or a spare part."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=20, choices=ItemCategory.choices, db_index=True)

    # e.g. 'Mountain', 'Road', 'Urban' for bikes or 'Handlebar', 'Pedal' for parts
    type = models.CharField(max_length=100, blank=True)
    brand = models.CharField(max_length=100, blank=True)

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    stock = models.PositiveIntegerField(default=0)

    # Parts only
    part_type = models.CharField(max_length=100, blank=True)
    compatibility = models.CharField(max_length=200, blank=True)

    image_url = models.URLField(max_length=500, blank=True)
    is_available_for_rent = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_items'
        indexes = [
            models.Index(fields=['category', 'is_available_for_rent'], name='items_cat_rent_idx'),
        ]
        constraints = [
            models.CheckConstraint(check=models.Q(stock__gte=0), name='item_stock_non_negative'),
            models.CheckConstraint(check=models.Q(price__gte=0), name='item_price_non_negative'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.category}) - stock {self.stock}"

    def has_stock_for(self, quantity):
        return self.stock >= quantity
