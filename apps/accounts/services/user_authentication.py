"""User authentication service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import (
    InvalidCredentialsError,
    InactiveAccountError,
    EmployeeAccessDeniedError,
)

User = get_user_model()


def _get_user_for_login(email: str) -> User:
    try:
        return (
            User.objects
            .select_for_update()
            .get(email__iexact=email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid email or password")


def _complete_login(user: User, password: str) -> User:
    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    return user


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    user = _get_user_for_login(email)
    return _complete_login(user, password)


@transaction.atomic
def authenticate_employee(*, email: str, password: str) -> User:
    """
    Authenticate an employee or administrator.

    The role is checked before the password, so customers are told they
    lack access rather than that their password is wrong.

    Raises:
        InvalidCredentialsError: If credentials are invalid
        EmployeeAccessDeniedError: If the user is neither employee nor admin
        InactiveAccountError: If account is deactivated
    """
    user = _get_user_for_login(email)

    if not user.is_employee and not user.is_admin:
        raise EmployeeAccessDeniedError("Access denied. Employees or administrators only.")

    return _complete_login(user, password)
