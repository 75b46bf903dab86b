"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import EmailAlreadyRegisteredError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    first_name: str,
    last_name: str,
    email: str,
    password: str
) -> User:
    """
    Register a new customer account.

    Customers are never employees or admins; those roles are granted
    through the admin site or the ``seed_admin`` command.

    Args:
        first_name: Customer first name
        last_name: Customer last name
        email: Login email, must be unused
        password: Plain password (will be hashed)

    Returns:
        Created User instance

    Raises:
        EmailAlreadyRegisteredError: If the email is taken
    """
    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise EmailAlreadyRegisteredError(f"Email {email} is already registered")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            is_admin=False,
            is_employee=False,
        )
    except IntegrityError:
        # Lost a race with a concurrent registration
        raise EmailAlreadyRegisteredError(f"Email {email} is already registered")

    logger.info("Registered user %s", user.id)
    return user
