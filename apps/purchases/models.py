from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class DispatchStatus(models.TextChoices):
    PENDING = 'Pending', 'Pending'
    IN_DISPATCH = 'InDispatch', 'In dispatch'
    DELIVERED = 'Delivered', 'Delivered'
    CANCELLED = 'Cancelled', 'Cancelled'


class DispatchRecord(models.Model):
    """
    Priced snapshot of a completed purchase.

    Created exactly once per successful purchase, together with the stock
    decrements of its items. Only the status changes afterwards.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    delivery_date = models.DateField()

    # Customer details as given at checkout
    customer_name = models.CharField(max_length=200)
    customer_email = models.EmailField()
    customer_address = models.CharField(max_length=500, blank=True)

    status = models.CharField(
        max_length=20,
        choices=DispatchStatus.choices,
        default=DispatchStatus.PENDING
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'dispatch_records'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='dispatch_status_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Dispatch {self.id} for {self.customer_name} ({self.status})"

    def calculate_total(self):
        """Sum of the line subtotals."""
        return sum((line.subtotal for line in self.lines.all()), Decimal('0.00'))


class DispatchLine(models.Model):
    """One purchased cart line, frozen at purchase time."""

    record = models.ForeignKey(
        DispatchRecord,
        on_delete=models.CASCADE,
        related_name='lines'
    )
    position = models.PositiveSmallIntegerField()

    # Identity link only; the snapshot outlives catalog edits and deletions
    item = models.ForeignKey(
        'inventory.Item',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='dispatch_lines'
    )
    name = models.CharField(max_length=200)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price_at_purchase = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    class Meta:
        db_table = 'dispatch_lines'
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(
                fields=['record', 'position'],
                name='dispatch_line_position_uniq'
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.name}"

    @property
    def subtotal(self):
        return self.quantity * self.price_at_purchase
