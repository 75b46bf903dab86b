from django.contrib import admin
from django.utils.html import format_html
from .models import DispatchRecord, DispatchLine, DispatchStatus


class DispatchLineInline(admin.TabularInline):
    """Read-only line snapshots within a dispatch record."""
    model = DispatchLine
    extra = 0
    fields = ['position', 'item', 'name', 'quantity', 'price_at_purchase']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        """Lines are created by the purchase service only."""
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DispatchRecord)
class DispatchRecordAdmin(admin.ModelAdmin):
    """
    Admin interface for dispatch records.

    Provides dispatch management including:
    - Record listing with status badges
    - Inline line snapshots
    - Filtering by status and delivery date
    - Actions to move records through delivery
    """

    list_display = [
        'customer_name',
        'customer_email',
        'total_amount',
        'delivery_date',
        'status_badge',
        'created_at',
    ]
    list_filter = ['status', 'delivery_date', 'created_at']
    search_fields = ['customer_name', 'customer_email', 'customer_address', 'lines__name']
    readonly_fields = [
        'id',
        'total_amount',
        'delivery_date',
        'customer_name',
        'customer_email',
        'customer_address',
        'created_at',
    ]
    date_hierarchy = 'created_at'
    inlines = [DispatchLineInline]

    def status_badge(self, obj):
        """Display dispatch status as colored badge."""
        colors = {
            DispatchStatus.PENDING: ('#E5C49A', '#2C1810'),
            DispatchStatus.IN_DISPATCH: ('#A47449', 'white'),
            DispatchStatus.DELIVERED: ('#6B8E5E', 'white'),
            DispatchStatus.CANCELLED: ('#B85C5C', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'

    actions = ['mark_in_dispatch', 'mark_delivered']

    @admin.action(description='Mark as in dispatch')
    def mark_in_dispatch(self, request, queryset):
        count = queryset.update(status=DispatchStatus.IN_DISPATCH)
        self.message_user(request, f'{count} dispatch record(s) in dispatch.')

    @admin.action(description='Mark as delivered')
    def mark_delivered(self, request, queryset):
        count = queryset.update(status=DispatchStatus.DELIVERED)
        self.message_user(request, f'{count} dispatch record(s) delivered.')
