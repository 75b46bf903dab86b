import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a regular customer."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        first_name='Test',
        last_name='User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        first_name='Inactive',
        last_name='User',
        is_active=False,
    )


@pytest.fixture
def employee(db):
    """Create and return a shop employee."""
    return User.objects.create_employee(
        email='employee@example.com',
        password='TestPass123!',
        first_name='Shop',
        last_name='Employee',
    )


@pytest.fixture
def admin_user(db):
    """Create and return an administrator."""
    return User.objects.create_superuser(
        email='admin@example.com',
        password='AdminPass123!',
        first_name='Admin',
        last_name='User',
    )
