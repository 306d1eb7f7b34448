from .push_serializers import SubscriptionSerializer, BroadcastSerializer

__all__ = [
    'SubscriptionSerializer',
    'BroadcastSerializer',
]
