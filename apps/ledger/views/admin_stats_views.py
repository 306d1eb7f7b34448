from rest_framework.views import APIView
from rest_framework.response import Response

from apps.common.permissions import IsAdmin
from ..services import BalanceService


class AdminDailyStatsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(BalanceService.daily_stats())
