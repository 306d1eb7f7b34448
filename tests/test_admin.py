"""
Admin-only endpoints: user roster, daily stats and admin toggling.
"""
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from rest_framework.test import APIClient

from apps.ledger.services import BalanceService
from apps.users.models import User
from apps.users.services import AuthService
from tests.factories import UserFactory, LogEntryFactory, RedemptionFactory

UTC = ZoneInfo('UTC')


@pytest.mark.django_db
class TestAdminGate:

    @pytest.mark.parametrize('method, path', [
        ('get', '/api/admin/users'),
        ('get', '/api/admin/stats/daily'),
        ('post', '/api/push/test'),
    ])
    def test_non_admin_is_forbidden(self, user_client, method, path):
        response = getattr(user_client, method)(path)

        assert response.status_code == 403
        assert response.json() == {'error': 'Admin access required'}

    def test_anonymous_is_unauthenticated(self, api_client):
        response = api_client.get('/api/admin/users')

        assert response.status_code == 401

    def test_revoked_admin_with_old_token_is_forbidden(self, db):
        former = UserFactory(email='former@example.com', is_admin=True)
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {AuthService.issue_token(former)}')

        User.objects.filter(pk=former.pk).update(is_admin=False)
        response = client.get('/api/admin/users')

        assert response.status_code == 403


@pytest.mark.django_db
class TestAdminUsers:

    def test_roster_newest_first_with_totals(self, admin_api_client, admin):
        veteran = UserFactory(email='veteran@example.com')
        rookie = UserFactory(email='rookie@example.com')
        User.objects.filter(pk=admin.pk).update(created_at=datetime(2024, 1, 1, tzinfo=UTC))
        User.objects.filter(pk=veteran.pk).update(created_at=datetime(2024, 2, 1, tzinfo=UTC))
        User.objects.filter(pk=rookie.pk).update(created_at=datetime(2024, 3, 1, tzinfo=UTC))

        LogEntryFactory(user=veteran, points=40)
        LogEntryFactory(user=veteran, points=60)
        RedemptionFactory(user=veteran, cost=25)
        RedemptionFactory(user=veteran, cost=5)

        response = admin_api_client.get('/api/admin/users')

        assert response.status_code == 200
        rows = response.json()
        assert [row['email'] for row in rows] == ['rookie@example.com', 'veteran@example.com', 'admin@example.com']
        by_email = {row['email']: row for row in rows}
        assert (by_email['veteran@example.com']['total_earned'], by_email['veteran@example.com']['total_spent']) == (100, 30)
        assert (by_email['rookie@example.com']['total_earned'], by_email['rookie@example.com']['total_spent']) == (0, 0)
        assert 'password' not in rows[0]

    def test_toggle_twice_restores_flag(self, admin_api_client, user):
        first = admin_api_client.post(f'/api/admin/users/{user.id}/toggle-admin')
        second = admin_api_client.post(f'/api/admin/users/{user.id}/toggle-admin')

        assert first.json()['is_admin'] is True
        assert second.json()['is_admin'] is False
        user.refresh_from_db()
        assert user.is_admin is False

    def test_toggle_unknown_user_is_not_found(self, admin_api_client):
        response = admin_api_client.post('/api/admin/users/00000000-0000-0000-0000-000000000000/toggle-admin')

        assert response.status_code == 404
        assert response.json() == {'error': 'User not found'}

    def test_promoted_user_gains_access_with_existing_token(self, admin_api_client, user, user_client):
        assert user_client.get('/api/admin/users').status_code == 403

        admin_api_client.post(f'/api/admin/users/{user.id}/toggle-admin')

        assert user_client.get('/api/admin/users').status_code == 200


@pytest.mark.django_db
class TestDailyStats:

    def test_buckets_by_day_newest_first(self, admin_api_client, user):
        LogEntryFactory(user=user, points=10, timestamp=datetime(2024, 4, 1, 8, tzinfo=UTC))
        LogEntryFactory(user=user, points=15, timestamp=datetime(2024, 4, 1, 20, tzinfo=UTC))
        LogEntryFactory(user=user, points=5, timestamp=datetime(2024, 4, 3, 9, tzinfo=UTC))
        RedemptionFactory(user=user, cost=12, timestamp=datetime(2024, 4, 2, 9, tzinfo=UTC))

        response = admin_api_client.get('/api/admin/stats/daily')

        assert response.status_code == 200
        assert response.json() == {
            'logs': [
                {'day': '2024-04-03', 'count': 1, 'points': 5},
                {'day': '2024-04-01', 'count': 2, 'points': 25},
            ],
            'redemptions': [
                {'day': '2024-04-02', 'count': 1, 'cost': 12},
            ],
        }

    def test_limited_to_most_recent_days(self, user):
        for day in range(1, 8):
            LogEntryFactory(user=user, points=1, timestamp=datetime(2024, 5, day, 12, tzinfo=UTC))

        stats = BalanceService.daily_stats(days=3)

        assert [bucket['day'] for bucket in stats['logs']] == ['2024-05-07', '2024-05-06', '2024-05-05']

    def test_zero_days_returns_no_buckets(self, user):
        LogEntryFactory(user=user, points=1, timestamp=datetime(2024, 5, 1, 12, tzinfo=UTC))

        assert BalanceService.daily_stats(days=0) == {'logs': [], 'redemptions': []}

    def test_admin_summary_combines_roster_and_buckets(self, user):
        LogEntryFactory(user=user, points=9, timestamp=datetime(2024, 6, 1, 12, tzinfo=UTC))

        summary = BalanceService.admin_summary()

        assert [u.total_earned for u in summary['per_user']] == [9]
        assert summary['daily_buckets']['logs'] == [{'day': '2024-06-01', 'count': 1, 'points': 9}]
        assert summary['daily_buckets']['redemptions'] == []


@pytest.mark.django_db
class TestMakeAdminCommand:

    def test_promotes_existing_user(self, user):
        from django.core.management import call_command

        call_command('make_admin', '--email', user.email)

        user.refresh_from_db()
        assert user.is_admin is True

    def test_creates_missing_user_with_password(self):
        from django.core.management import call_command

        call_command('make_admin', '--email', 'boss@example.com', '--password', 'bosspass')

        boss = User.objects.get(email='boss@example.com')
        assert boss.is_admin is True
        assert boss.check_password('bosspass')

    def test_missing_user_without_password_fails(self):
        from django.core.management import call_command
        from django.core.management.base import CommandError

        with pytest.raises(CommandError):
            call_command('make_admin', '--email', 'ghost@example.com')
