from django.urls import path

from apps.users.views.admin_views import AdminUserListView, ToggleAdminView
from apps.ledger.views.admin_stats_views import AdminDailyStatsView

app_name = 'common'

urlpatterns = [
    # Admin endpoints
    path('admin/users', AdminUserListView.as_view(), name='admin-users'),
    path('admin/users/<uuid:pk>/toggle-admin', ToggleAdminView.as_view(), name='admin-toggle-admin'),
    path('admin/stats/daily', AdminDailyStatsView.as_view(), name='admin-stats-daily'),
]
