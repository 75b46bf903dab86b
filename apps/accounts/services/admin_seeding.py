"""Bootstrap administrator account."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def ensure_admin_user(*, email: str, password: str):
    """
    Make sure an administrator with ``email`` exists.

    Existing accounts are left untouched, including their password.

    Returns:
        tuple: (User, created)
    """
    existing = User.objects.filter(email__iexact=email).first()
    if existing:
        logger.info("Admin user %s already exists", email)
        return existing, False

    admin = User.objects.create_superuser(
        email=email,
        password=password,
        first_name='Admin',
        last_name='Masterbike',
    )
    logger.info("Created admin user %s", email)
    return admin, True
