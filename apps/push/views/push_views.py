"""
Push notification views.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from apps.common.exceptions import error_body
from apps.common.permissions import IsAdmin
from ..serializers import SubscriptionSerializer, BroadcastSerializer
from ..services import PushService


class PublicKeyView(APIView):
    """VAPID application server key for ``pushManager.subscribe``"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        public_key = PushService.public_key()
        if not public_key:
            return error_body('Push notifications are not configured', status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response({'publicKey': public_key})


class SubscribeView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = SubscriptionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        PushService.subscribe(
            request.user,
            endpoint=data['endpoint'],
            p256dh=data['keys']['p256dh'],
            auth=data['keys']['auth'],
        )
        return Response({}, status=status.HTTP_201_CREATED)


class BroadcastTestView(APIView):
    """Send a test notification to every subscriber"""
    permission_classes = [IsAdmin]

    def post(self, request):
        serializer = BroadcastSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = PushService.broadcast(
            serializer.validated_data['title'],
            serializer.validated_data['body'],
        )
        return Response(result)
