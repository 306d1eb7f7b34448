"""
User authentication views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers import (
    UserSerializer, SignupSerializer, LoginSerializer, FederatedLoginSerializer
)
from ..services import AuthService


class SignupView(APIView):
    """Email/password signup endpoint"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, token = AuthService.signup(**serializer.validated_data)
        return Response({'user': UserSerializer(user).data, 'token': token})


class LoginView(APIView):
    """Password-based login endpoint"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, token = AuthService.login(
            serializer.validated_data['email'],
            serializer.validated_data['password'],
        )
        return Response({'user': UserSerializer(user).data, 'token': token})


class FederatedLoginView(APIView):
    """Google Sign-In endpoint"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = FederatedLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, token = AuthService.login_with_federated_identity(
            serializer.validated_data['assertion']
        )
        return Response({'user': UserSerializer(user).data, 'token': token})
