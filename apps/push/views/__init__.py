from .push_views import PublicKeyView, SubscribeView, BroadcastTestView

__all__ = [
    'PublicKeyView',
    'SubscribeView',
    'BroadcastTestView',
]
