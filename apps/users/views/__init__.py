"""
User views module.
"""
from .auth_views import SignupView, LoginView, FederatedLoginView
from .profile_views import MeView
from .admin_views import AdminUserListView, ToggleAdminView

__all__ = [
    'SignupView',
    'LoginView',
    'FederatedLoginView',
    'MeView',
    'AdminUserListView',
    'ToggleAdminView',
]
