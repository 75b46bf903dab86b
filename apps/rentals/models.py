from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class RentalStatus(models.TextChoices):
    ACTIVE = 'Active', 'Active'
    COMPLETED = 'Completed', 'Completed'
    CANCELLED = 'Cancelled', 'Cancelled'


class Rental(models.Model):
    """Bicycle rental booked for a customer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Identity link only; deleting the bike from inventory keeps the rental
    bike = models.ForeignKey(
        'inventory.Item',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='rentals'
    )
    bike_name = models.CharField(max_length=200)

    customer_name = models.CharField(max_length=200)
    customer_email = models.EmailField()

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    total_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    status = models.CharField(
        max_length=20,
        choices=RentalStatus.choices,
        default=RentalStatus.ACTIVE
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'rentals'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='rentals_status_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.bike_name} for {self.customer_name} ({self.status})"
