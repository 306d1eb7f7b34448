"""
Bearer-token authentication for the API
"""
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, AuthenticationFailed
from rest_framework_simplejwt.settings import api_settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
import logging

logger = logging.getLogger('security')

User = get_user_model()


class SafeJWTAuthentication(JWTAuthentication):
    """
    JWT authentication that always loads the stored user.

    The token is treated as an identity reference only: the user row is read
    on every request, so authorization fields such as ``is_admin`` come from
    the database and never from the claim embedded at issue time.

    When a token names a user that no longer exists the request proceeds as
    unauthenticated instead of failing inside the lookup.
    """

    def authenticate(self, request):
        result = super().authenticate(request)
        if result is None:
            return None
        user, validated_token = result
        if user is None:
            return None
        return user, validated_token

    def get_user(self, validated_token):
        try:
            user_id = validated_token.get(api_settings.USER_ID_CLAIM)
            if user_id is None:
                raise InvalidToken('Token contained no recognizable user identification')

            user = User.objects.get(**{api_settings.USER_ID_FIELD: user_id})
        except User.DoesNotExist:
            logger.warning(f'JWT token contains unknown user_id: {user_id}')
            return None
        except (TypeError, ValueError, KeyError, DjangoValidationError) as e:
            logger.error(f'Invalid token payload: {e}')
            raise InvalidToken(f'Token contained invalid user identification: {e}')
        except InvalidToken:
            raise
        except Exception as e:
            logger.error(f'Unexpected error during user lookup: {e}')
            raise AuthenticationFailed(f'User lookup failed: {e}')

        if not user.is_active:
            logger.warning(f'Token presented for inactive user {user.pk}')
            raise AuthenticationFailed('User is inactive')
        return user
