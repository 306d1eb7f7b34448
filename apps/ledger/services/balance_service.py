"""
Derived balance views over the ledger.

Nothing here is stored: every figure is a fold over log entries and
redemptions at query time.
"""
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models import Count, IntegerField, OuterRef, Subquery, Sum, Value
from django.db.models.functions import Coalesce, TruncDate
from django.utils import timezone

from ..models import LogEntry, Redemption


def _sum_subquery(model, field):
    """Per-user SUM(field) as a correlated subquery, 0 when there are no rows"""
    totals = (
        model.objects
        .filter(user=OuterRef('pk'))
        .order_by()
        .values('user')
        .annotate(total=Sum(field))
        .values('total')
    )
    return Coalesce(Subquery(totals, output_field=IntegerField()), Value(0))


class BalanceService:
    """Read-only aggregation over the points ledger"""

    @staticmethod
    def totals_of(owner):
        earned = LogEntry.objects.filter(user=owner).aggregate(total=Coalesce(Sum('points'), 0))['total']
        spent = Redemption.objects.filter(user=owner).aggregate(total=Coalesce(Sum('cost'), 0))['total']
        return {'total_earned': earned, 'total_spent': spent}

    @staticmethod
    def balance_of(owner):
        totals = BalanceService.totals_of(owner)
        return totals['total_earned'] - totals['total_spent']

    @staticmethod
    def day_bounds(reference_time=None):
        """[start, end) of the calendar day containing reference_time, in TIME_ZONE"""
        local = timezone.localtime(reference_time or timezone.now())
        start = local.replace(hour=0, minute=0, second=0, microsecond=0)
        end = timezone.localtime(start + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
        return start, end

    @staticmethod
    def today_earnings_of(owner, reference_time=None):
        start, end = BalanceService.day_bounds(reference_time)
        return (
            LogEntry.objects
            .filter(user=owner, timestamp__gte=start, timestamp__lt=end)
            .aggregate(total=Coalesce(Sum('points'), 0))['total']
        )

    @staticmethod
    def summary_of(owner, reference_time=None):
        """Balance card for one user"""
        totals = BalanceService.totals_of(owner)
        return {
            'balance': totals['total_earned'] - totals['total_spent'],
            'today_earned': BalanceService.today_earnings_of(owner, reference_time),
            **totals,
        }

    @staticmethod
    def users_with_totals():
        """All users newest first, annotated with total_earned and total_spent"""
        User = get_user_model()
        return (
            User.objects
            .annotate(
                total_earned=_sum_subquery(LogEntry, 'points'),
                total_spent=_sum_subquery(Redemption, 'cost'),
            )
            .order_by('-created_at')
        )

    @staticmethod
    def daily_stats(days=None):
        """
        Per calendar day counts and sums across all users, most recent
        ``days`` days that have any activity, newest first.
        """
        if days is None:
            days = settings.DAILY_STATS_DAYS
        tz = timezone.get_current_timezone()

        logs = (
            LogEntry.objects
            .annotate(day=TruncDate('timestamp', tzinfo=tz))
            .values('day')
            .annotate(count=Count('id'), points=Sum('points'))
            .order_by('-day')[:days]
        )
        redemptions = (
            Redemption.objects
            .annotate(day=TruncDate('timestamp', tzinfo=tz))
            .values('day')
            .annotate(count=Count('id'), cost=Sum('cost'))
            .order_by('-day')[:days]
        )

        return {
            'logs': [
                {'day': row['day'].isoformat(), 'count': row['count'], 'points': row['points']}
                for row in logs
            ],
            'redemptions': [
                {'day': row['day'].isoformat(), 'count': row['count'], 'cost': row['cost']}
                for row in redemptions
            ],
        }

    @staticmethod
    def admin_summary(days=None):
        """
        Roster and daily buckets in one call, for in-process callers.
        The HTTP admin views serve the two halves separately.
        """
        return {
            'per_user': list(BalanceService.users_with_totals()),
            'daily_buckets': BalanceService.daily_stats(days),
        }
