"""
Cross-cutting behaviour: health check, error bodies and the middleware.
"""
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.common.exceptions import _flatten


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get('/health/')

    assert response.status_code == 200
    body = response.json()
    assert body['status'] == 'healthy'
    assert body['database']['status'] == 'healthy'


@pytest.mark.django_db
@patch('apps.common.health_views.connection')
def test_health_check_reports_database_failure(mock_connection, api_client):
    mock_connection.vendor = 'sqlite'
    mock_connection.cursor.side_effect = DatabaseError('down')

    response = api_client.get('/health/')

    assert response.status_code == 503
    assert response.json()['status'] == 'unhealthy'


class TestErrorFlattening:

    def test_field_errors_are_joined(self):
        detail = {'email': ['This field is required.'], 'password': ['Too short.']}

        assert _flatten(detail) == 'email: This field is required.; password: Too short.'

    def test_non_field_errors_drop_the_key(self):
        assert _flatten({'non_field_errors': ['Bad combination.']}) == 'Bad combination.'

    def test_detail_wins(self):
        assert _flatten({'detail': 'Token is invalid', 'code': 'token_not_valid'}) == 'Token is invalid'


@pytest.mark.django_db
class TestErrorBodies:

    @patch('apps.ledger.views.ledger_views.LedgerService.list_earnings')
    def test_database_error_becomes_store_unavailable(self, mock_list, user_client):
        mock_list.side_effect = DatabaseError('disk I/O error')

        response = user_client.get('/api/logs')

        assert response.status_code == 500
        assert response.json() == {'error': 'Data store unavailable'}

    @patch('apps.ledger.views.ledger_views.BalanceService.summary_of')
    def test_unexpected_error_is_a_generic_500(self, mock_summary, user_client):
        mock_summary.side_effect = RuntimeError('boom')

        response = user_client.get('/api/balance')

        assert response.status_code == 500
        assert response.json() == {'error': 'Internal server error'}

    def test_validation_error_is_flat(self, user_client):
        response = user_client.post('/api/redemptions', {'rewardName': 'X'}, format='json')

        assert response.status_code == 400
        assert response.json() == {'error': 'cost: This field is required.'}


@pytest.mark.django_db
def test_health_check_reports_configured_features(api_client):
    response = api_client.get('/health/')

    assert response.json()['features'] == {'push': True, 'federated_login': True}
