from django.contrib import admin
from .models import Repair, RepairStatus


@admin.register(Repair)
class RepairAdmin(admin.ModelAdmin):
    list_display = [
        'bike_type',
        'bike_brand',
        'customer_name',
        'customer_email',
        'status',
        'created_at',
    ]
    list_filter = ['status', 'created_at']
    search_fields = ['bike_type', 'bike_brand', 'customer_name', 'customer_email', 'problem_description']
    readonly_fields = ['id', 'created_at']
    actions = ['mark_in_progress', 'mark_completed']

    @admin.action(description='Mark as in progress')
    def mark_in_progress(self, request, queryset):
        count = queryset.update(status=RepairStatus.IN_PROGRESS)
        self.message_user(request, f'{count} repair order(s) in progress.')

    @admin.action(description='Mark as completed')
    def mark_completed(self, request, queryset):
        count = queryset.update(status=RepairStatus.COMPLETED)
        self.message_user(request, f'{count} repair order(s) completed.')
