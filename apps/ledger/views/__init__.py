from .ledger_views import LogListView, RedemptionListView, BalanceView
from .admin_stats_views import AdminDailyStatsView

__all__ = [
    'LogListView',
    'RedemptionListView',
    'BalanceView',
    'AdminDailyStatsView',
]
