from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Custom admin interface for User model.

    Provides user management including:
    - User listing with role badges
    - Filtering by role and status
    - Bulk actions to grant or revoke employee access
    """

    list_display = [
        'email',
        'first_name',
        'last_name',
        'role_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_admin',
        'is_employee',
        'created_at',
    ]

    search_fields = [
        'email',
        'first_name',
        'last_name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'first_name', 'last_name', 'password')
        }),
        ('Roles', {
            'fields': ('is_active', 'is_employee', 'is_admin', 'is_superuser'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'password1', 'password2'),
        }),
        ('Roles', {
            'fields': ('is_employee', 'is_admin'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = []

    def role_badge(self, obj):
        """Display the user's role as a colored badge."""
        if obj.is_admin:
            label, bg = 'Admin', '#B85C5C'
        elif obj.is_employee:
            label, bg = 'Employee', '#A47449'
        else:
            label, bg = 'Customer', '#6B8E5E'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, label
        )
    role_badge.short_description = 'Role'

    actions = [
        'grant_employee_access',
        'revoke_employee_access',
    ]

    @admin.action(description='Grant employee access')
    def grant_employee_access(self, request, queryset):
        count = queryset.update(is_employee=True)
        self.message_user(request, f'{count} user(s) are now employees.')

    @admin.action(description='Revoke employee access')
    def revoke_employee_access(self, request, queryset):
        """Revoke employee access (admins keep theirs)."""
        safe_queryset = queryset.filter(is_admin=False)
        count = safe_queryset.update(is_employee=False)
        skipped = queryset.count() - count
        msg = f'Revoked employee access for {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} admin(s).'
        self.message_user(request, msg)
