"""
Admin user management views.
"""
from rest_framework.views import APIView
from rest_framework.response import Response

from apps.common.permissions import IsAdmin
from apps.ledger.services import BalanceService
from ..serializers import UserSerializer, AdminUserSummarySerializer
from ..services import AuthService


class AdminUserListView(APIView):
    """All users, newest first, with lifetime earned and spent totals"""
    permission_classes = [IsAdmin]

    def get(self, request):
        users = BalanceService.users_with_totals()
        return Response(AdminUserSummarySerializer(users, many=True).data)


class ToggleAdminView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request, pk):
        user = AuthService.toggle_admin(request.user, pk)
        return Response(UserSerializer(user).data)
