"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
    EmployeeAccessDeniedError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, authenticate_employee
from .admin_seeding import ensure_admin_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'EmailAlreadyRegisteredError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'EmployeeAccessDeniedError',
    # Services
    'register_user',
    'authenticate_user',
    'authenticate_employee',
    'ensure_admin_user',
]
