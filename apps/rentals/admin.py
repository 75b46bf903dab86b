from django.contrib import admin
from .models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    """Admin interface for rentals."""

    list_display = [
        'bike_name',
        'customer_name',
        'customer_email',
        'start_date',
        'end_date',
        'total_price',
        'status',
        'created_at',
    ]
    list_filter = ['status', 'start_date']
    search_fields = ['bike_name', 'customer_name', 'customer_email']
    readonly_fields = ['id', 'created_at']
    date_hierarchy = 'start_date'
