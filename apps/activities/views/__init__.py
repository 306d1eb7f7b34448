from .activity_views import ActivityListView, ActivityDetailView

__all__ = [
    'ActivityListView',
    'ActivityDetailView',
]
