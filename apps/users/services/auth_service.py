"""
Identity operations: signup, password and federated login, token issue,
admin toggling.
"""
import logging

from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import AccessToken

from apps.common.exceptions import (
    DuplicateEmail, InvalidCredentials, FederationVerificationFailed, NotFound
)
from apps.common.google_identity import GoogleIdentityAPI
from ..models import User

security_logger = logging.getLogger('security')


class AuthService:
    """Service for identity and token operations"""

    @staticmethod
    def issue_token(user):
        """
        Signed bearer token carrying user_id, email and is_admin.

        The embedded is_admin is informational for the client; the server
        re-reads the stored flag on every privileged check.
        """
        token = AccessToken.for_user(user)
        token['email'] = user.email
        token['is_admin'] = user.is_admin
        return str(token)

    @staticmethod
    def signup(email, password, name=''):
        """Create a password account; DuplicateEmail if the email is taken"""
        if User.objects.get_by_email(email) is not None:
            raise DuplicateEmail()

        try:
            with transaction.atomic():
                user = User.objects.create_user(email=email, password=password, name=name or '')
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            raise DuplicateEmail()

        security_logger.info(f"Signup: user {user.id} <{user.email}>")
        return user, AuthService.issue_token(user)

    @staticmethod
    def login(email, password):
        """
        Password login. Unknown email and wrong password fail identically.
        """
        user = User.objects.get_by_email(email)
        if user is None:
            # Run the hasher anyway so response time does not reveal unknown emails
            User().set_password(password)
            security_logger.warning(f"Failed login for unknown email <{email}>")
            raise InvalidCredentials()

        if not user.is_active or not user.check_password(password):
            security_logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentials()

        return user, AuthService.issue_token(user)

    @staticmethod
    def login_with_federated_identity(assertion, identity_api=None):
        """
        Sign in with a Google ID token. First sight of an email provisions an
        account with an unusable password.
        """
        try:
            identity_api = identity_api or GoogleIdentityAPI()
        except ValueError as e:
            security_logger.error(f"Federated login unavailable: {e}")
            raise FederationVerificationFailed('Federated login is not configured')

        claims, error = identity_api.verify_id_token(assertion)
        if error:
            security_logger.warning(f"Federated assertion rejected: {error}")
            raise FederationVerificationFailed()

        user = User.objects.get_by_email(claims['email'])
        if user is None:
            try:
                with transaction.atomic():
                    user = User.objects.create_user(
                        email=claims['email'],
                        password=None,
                        name=claims['name'],
                    )
                security_logger.info(f"Provisioned federated user {user.id} <{user.email}>")
            except IntegrityError:
                user = User.objects.get_by_email(claims['email'])

        if not user.is_active:
            raise FederationVerificationFailed()

        return user, AuthService.issue_token(user)

    @staticmethod
    def toggle_admin(actor, user_id):
        """Flip is_admin on the target user exactly once"""
        with transaction.atomic():
            user = User.objects.select_for_update().filter(pk=user_id).first()
            if user is None:
                raise NotFound('User not found')
            user.is_admin = not user.is_admin
            user.save(update_fields=['is_admin', 'updated_at'])

        security_logger.info(
            f"Admin {actor.id} set is_admin={user.is_admin} on user {user.id}"
        )
        return user
