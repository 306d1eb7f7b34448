from .push_service import PushService

__all__ = [
    'PushService',
]
