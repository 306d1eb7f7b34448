"""
Activity catalog models.
"""
from .activity import Activity, DEFAULT_ICON

__all__ = [
    'Activity',
    'DEFAULT_ICON',
]
