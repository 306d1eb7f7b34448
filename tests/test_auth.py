"""
Identity tests: signup, password login, federated login and the bearer gate.
"""
import time
from unittest.mock import patch, Mock

import pytest
from django.db import IntegrityError, transaction
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.users.models import User
from apps.users.services import AuthService
from tests.factories import UserFactory, DEFAULT_PASSWORD

GOOGLE_CLIENT = 'test-client.apps.googleusercontent.com'


def tokeninfo_response(status_code=200, **overrides):
    claims = {
        'aud': GOOGLE_CLIENT,
        'iss': 'https://accounts.google.com',
        'exp': str(int(time.time()) + 3600),
        'sub': '1234567890',
        'email': 'fed@example.com',
        'email_verified': 'true',
        'name': 'Fed User',
    }
    claims.update(overrides)
    response = Mock()
    response.status_code = status_code
    response.json.return_value = claims
    return response


@pytest.mark.django_db
class TestSignup:

    def test_signup_returns_user_and_token(self, api_client):
        response = api_client.post('/api/auth/signup', {
            'email': 'new@example.com',
            'password': 'pw12345',
            'name': 'New',
        }, format='json')

        assert response.status_code == 200
        body = response.json()
        assert body['user']['email'] == 'new@example.com'
        assert body['user']['is_admin'] is False
        assert 'password' not in body['user']

        claims = AccessToken(body['token'])
        assert claims['user_id'] == body['user']['id']
        assert claims['email'] == 'new@example.com'
        assert claims['is_admin'] is False

    def test_duplicate_email_rejected(self, api_client, user):
        response = api_client.post('/api/auth/signup', {
            'email': user.email,
            'password': 'another',
        }, format='json')

        assert response.status_code == 400
        assert response.json() == {'error': 'Email already exists'}
        assert User.objects.filter(email=user.email).count() == 1

        login = api_client.post('/api/auth/login', {
            'email': user.email,
            'password': DEFAULT_PASSWORD,
        }, format='json')
        assert login.status_code == 200
        assert login.json()['user']['id'] == str(user.id)

    def test_duplicate_email_differs_only_by_case(self, api_client, user):
        response = api_client.post('/api/auth/signup', {
            'email': user.email.upper(),
            'password': 'another',
        }, format='json')

        assert response.status_code == 400

    def test_missing_fields_are_a_validation_error(self, api_client):
        response = api_client.post('/api/auth/signup', {'email': 'x@example.com'}, format='json')

        assert response.status_code == 400
        assert 'password' in response.json()['error']

    def test_password_is_stored_hashed(self, api_client):
        api_client.post('/api/auth/signup', {
            'email': 'hash@example.com',
            'password': 'plaintext',
        }, format='json')

        stored = User.objects.get(email='hash@example.com')
        assert stored.password != 'plaintext'
        assert stored.check_password('plaintext')


@pytest.mark.django_db
class TestLogin:

    def test_login_with_correct_password(self, api_client, user):
        response = api_client.post('/api/auth/login', {
            'email': user.email,
            'password': DEFAULT_PASSWORD,
        }, format='json')

        assert response.status_code == 200
        assert response.json()['user']['id'] == str(user.id)
        assert response.json()['token']

    def test_wrong_password_and_unknown_email_fail_identically(self, api_client, user):
        wrong_password = api_client.post('/api/auth/login', {
            'email': user.email,
            'password': 'nope',
        }, format='json')
        unknown_email = api_client.post('/api/auth/login', {
            'email': 'nobody@example.com',
            'password': 'nope',
        }, format='json')

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {'error': 'Invalid email or password'}

    def test_federated_only_user_cannot_use_password(self, api_client):
        federated = User.objects.create_user(email='fedonly@example.com', password=None)
        assert not federated.has_usable_password()

        for password in ('', '!', 'anything'):
            response = api_client.post('/api/auth/login', {
                'email': federated.email,
                'password': password,
            }, format='json')
            assert response.status_code in (400, 401)


@pytest.mark.django_db
class TestFederatedLogin:

    @patch('apps.common.google_identity.requests.get')
    def test_first_sight_provisions_account(self, mock_get, api_client):
        mock_get.return_value = tokeninfo_response()

        response = api_client.post('/api/auth/google', {'credential': 'id-token'}, format='json')

        assert response.status_code == 200
        assert response.json()['user']['email'] == 'fed@example.com'
        created = User.objects.get(email='fed@example.com')
        assert created.name == 'Fed User'
        assert not created.has_usable_password()

    @patch('apps.common.google_identity.requests.get')
    def test_existing_email_signs_in_without_duplicate(self, mock_get, api_client):
        existing = UserFactory(email='fed@example.com')
        mock_get.return_value = tokeninfo_response()

        response = api_client.post('/api/auth/federated', {'assertion': 'id-token'}, format='json')

        assert response.status_code == 200
        assert response.json()['user']['id'] == str(existing.id)
        assert User.objects.filter(email='fed@example.com').count() == 1

    @patch('apps.common.google_identity.requests.get')
    def test_wrong_audience_rejected_without_creating_user(self, mock_get, api_client):
        mock_get.return_value = tokeninfo_response(aud='someone-else.apps.googleusercontent.com')

        response = api_client.post('/api/auth/google', {'credential': 'id-token'}, format='json')

        assert response.status_code == 401
        assert not User.objects.filter(email='fed@example.com').exists()

    @patch('apps.common.google_identity.requests.get')
    def test_expired_token_rejected(self, mock_get, api_client):
        mock_get.return_value = tokeninfo_response(exp=str(int(time.time()) - 10))

        response = api_client.post('/api/auth/google', {'credential': 'id-token'}, format='json')

        assert response.status_code == 401

    @patch('apps.common.google_identity.requests.get')
    def test_unverified_email_rejected(self, mock_get, api_client):
        mock_get.return_value = tokeninfo_response(email_verified='false')

        response = api_client.post('/api/auth/google', {'credential': 'id-token'}, format='json')

        assert response.status_code == 401

    @patch('apps.common.google_identity.requests.get')
    def test_tokeninfo_error_rejected(self, mock_get, api_client):
        mock_get.return_value = tokeninfo_response(status_code=400, error='invalid_token')

        response = api_client.post('/api/auth/google', {'credential': 'garbage'}, format='json')

        assert response.status_code == 401
        assert 'error' in response.json()

    def test_missing_assertion_is_a_validation_error(self, api_client):
        response = api_client.post('/api/auth/google', {}, format='json')

        assert response.status_code == 400


@pytest.mark.django_db
class TestBearerGate:

    def test_me_returns_stored_profile(self, user_client, user):
        response = user_client.get('/api/auth/me')

        assert response.status_code == 200
        assert response.json()['email'] == user.email

    def test_missing_token_is_unauthenticated(self, api_client):
        response = api_client.get('/api/activities')

        assert response.status_code == 401
        assert 'error' in response.json()

    def test_tampered_token_is_rejected(self, api_client, user):
        token = AuthService.issue_token(user)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token[:-2]}xx')

        response = api_client.get('/api/activities')

        assert response.status_code == 401

    def test_token_for_deleted_user_is_rejected(self, db):
        ghost = UserFactory(email='ghost@example.com')
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {AuthService.issue_token(ghost)}')
        ghost.delete()

        response = client.get('/api/auth/me')

        assert response.status_code == 401


@pytest.mark.django_db
class TestEmailCase:

    def test_signup_stores_lower_case_email(self, api_client):
        response = api_client.post('/api/auth/signup', {
            'email': 'Mixed.Case@Example.COM',
            'password': 'pw12345',
        }, format='json')

        assert response.json()['user']['email'] == 'mixed.case@example.com'
        assert User.objects.filter(email='mixed.case@example.com').exists()

    def test_case_variants_collide_in_the_store(self):
        User.objects.create_user(email='Case@example.com', password='pw12345')

        with pytest.raises(IntegrityError), transaction.atomic():
            User.objects.create_user(email='case@EXAMPLE.com', password='pw12345')

    def test_login_ignores_email_case(self, api_client, user):
        response = api_client.post('/api/auth/login', {
            'email': user.email.upper(),
            'password': DEFAULT_PASSWORD,
        }, format='json')

        assert response.status_code == 200
        assert response.json()['user']['id'] == str(user.id)
