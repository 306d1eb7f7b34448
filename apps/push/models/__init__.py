from .subscription import PushSubscription

__all__ = [
    'PushSubscription',
]
