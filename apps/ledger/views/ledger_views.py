"""
Ledger views: earning, redeeming and the balance card.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers import (
    LogEntrySerializer, LogEntryCreateSerializer,
    RedemptionSerializer, RedemptionCreateSerializer,
    BalanceSerializer,
)
from ..services import LedgerService, BalanceService


class LogListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        entries = LedgerService.list_earnings(request.user)
        return Response(LogEntrySerializer(entries, many=True).data)

    def post(self, request):
        serializer = LogEntryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        entry = LedgerService.record_earning(
            request.user,
            activity_id=data.get('activityId'),
            activity_name=data.get('activityName'),
            points=data.get('points'),
        )
        return Response(LogEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class RedemptionListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        redemptions = LedgerService.list_redemptions(request.user)
        return Response(RedemptionSerializer(redemptions, many=True).data)

    def post(self, request):
        serializer = RedemptionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        redemption = LedgerService.record_redemption(
            request.user,
            reward_name=serializer.validated_data['rewardName'],
            cost=serializer.validated_data['cost'],
        )
        return Response(RedemptionSerializer(redemption).data, status=status.HTTP_201_CREATED)


class BalanceView(APIView):
    """Balance, today's earnings and lifetime totals for the caller"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        summary = BalanceService.summary_of(request.user)
        return Response(BalanceSerializer(summary).data)
