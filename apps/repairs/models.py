from django.db import models
import uuid


class RepairStatus(models.TextChoices):
    PENDING = 'Pending', 'Pending'
    IN_PROGRESS = 'InProgress', 'In progress'
    COMPLETED = 'Completed', 'Completed'
    CANCELLED = 'Cancelled', 'Cancelled'


class Repair(models.Model):
    """Repair order for a customer's bicycle."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    bike_type = models.CharField(max_length=100)
    bike_brand = models.CharField(max_length=100, blank=True)
    problem_description = models.TextField()

    customer_name = models.CharField(max_length=200)
    customer_email = models.EmailField()

    status = models.CharField(
        max_length=20,
        choices=RepairStatus.choices,
        default=RepairStatus.PENDING
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'repairs'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='repairs_status_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.bike_type} repair for {self.customer_name} ({self.status})"
