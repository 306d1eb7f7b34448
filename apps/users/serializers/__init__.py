"""
User serializers module.
"""
from .user_serializers import UserSerializer, AdminUserSummarySerializer
from .auth_serializers import SignupSerializer, LoginSerializer, FederatedLoginSerializer

__all__ = [
    'UserSerializer',
    'AdminUserSummarySerializer',
    'SignupSerializer',
    'LoginSerializer',
    'FederatedLoginSerializer',
]
