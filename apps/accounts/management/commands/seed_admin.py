"""
Management command to make sure the shop administrator exists.

Usage:
    python manage.py seed_admin
    python manage.py seed_admin --email boss@masterbike.cl --password s3cret
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from apps.accounts.services import ensure_admin_user


class Command(BaseCommand):
    help = 'Create the administrator account if it does not exist yet'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            default=settings.ADMIN_EMAIL,
            help='Administrator email (defaults to ADMIN_EMAIL)',
        )
        parser.add_argument(
            '--password',
            default=settings.ADMIN_PASSWORD,
            help='Administrator password (defaults to ADMIN_PASSWORD)',
        )

    def handle(self, *args, **options):
        user, created = ensure_admin_user(
            email=options['email'],
            password=options['password'],
        )
        if created:
            self.stdout.write(self.style.SUCCESS(f'Admin user {user.email} created.'))
        else:
            self.stdout.write(f'Admin user {user.email} already exists.')
