"""
Test configuration for the TaskPoint server.
"""
import pytest
from rest_framework.test import APIClient

from apps.users.services import AuthService
from tests.factories import UserFactory


def authenticate(client, user):
    """Attach a freshly issued bearer token for ``user`` to ``client``."""
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {AuthService.issue_token(user)}')
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return UserFactory(email='player@example.com', name='Player One')


@pytest.fixture
def other_user(db):
    return UserFactory(email='other@example.com', name='Other Player')


@pytest.fixture
def admin(db):
    return UserFactory(email='admin@example.com', name='Admin', is_admin=True)


@pytest.fixture
def user_client(user):
    return authenticate(APIClient(), user)


@pytest.fixture
def other_client(other_user):
    return authenticate(APIClient(), other_user)


@pytest.fixture
def admin_api_client(admin):
    return authenticate(APIClient(), admin)
