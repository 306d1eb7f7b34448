from .activity_serializers import ActivitySerializer

__all__ = [
    'ActivitySerializer',
]
