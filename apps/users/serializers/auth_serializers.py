"""
Request serializers for signup, password login and federated login.
"""
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')

    def validate_password(self, value):
        try:
            validate_password(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(list(e.messages))
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class FederatedLoginSerializer(serializers.Serializer):
    """
    Accepts the assertion as ``assertion`` or, as sent by the Google
    button on the client, ``credential``.
    """
    assertion = serializers.CharField(required=False)
    credential = serializers.CharField(required=False)

    def validate(self, attrs):
        assertion = attrs.get('assertion') or attrs.get('credential')
        if not assertion:
            raise serializers.ValidationError('assertion is required')
        return {'assertion': assertion}
