"""
Error taxonomy and the DRF exception handler.

Every error leaving the API is rendered as ``{"error": "<message>"}``.
"""
from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler
import logging

logger = logging.getLogger(__name__)


class DuplicateEmail(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Email already exists'
    default_code = 'duplicate_email'


class InvalidCredentials(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid email or password'
    default_code = 'invalid_credentials'


class FederationVerificationFailed(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Identity assertion could not be verified'
    default_code = 'federation_verification_failed'


class Forbidden(exceptions.PermissionDenied):
    default_detail = 'Admin access required'
    default_code = 'forbidden'


class NotFound(exceptions.NotFound):
    default_detail = 'Not found'


class InsufficientBalance(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Insufficient points balance'
    default_code = 'insufficient_balance'


class StoreUnavailable(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Data store unavailable'
    default_code = 'store_unavailable'


def _flatten(detail):
    """Collapse DRF error detail (str, list or dict) into one message."""
    if isinstance(detail, dict):
        if 'detail' in detail:
            return _flatten(detail['detail'])
        parts = []
        for field, value in detail.items():
            message = _flatten(value)
            parts.append(message if field == 'non_field_errors' else f'{field}: {message}')
        return '; '.join(parts)
    if isinstance(detail, (list, tuple)):
        return ' '.join(_flatten(item) for item in detail)
    return str(detail)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns ``{"error": message}`` bodies
    """
    if isinstance(exc, DatabaseError):
        logger.error(f"Store error: {exc}", exc_info=True)
        exc = StoreUnavailable()

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        return None

    if response.status_code >= 500:
        logger.error(f"API Exception: {exc}", exc_info=True)
    else:
        logger.info(f"API error {response.status_code}: {exc}")

    response.data = {'error': _flatten(response.data)}
    return response


def error_body(message, status_code=status.HTTP_400_BAD_REQUEST):
    """Build an error Response outside the DRF exception flow"""
    return Response({'error': message}, status=status_code)
