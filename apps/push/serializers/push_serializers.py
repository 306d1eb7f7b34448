"""
Push serializers.
"""
import base64
import binascii

from rest_framework import serializers

# RFC 8291: uncompressed P-256 public key and the 16-byte auth secret
P256DH_BYTES = 65
AUTH_BYTES = 16


def decode_base64url(value):
    return base64.urlsafe_b64decode(value + '=' * (-len(value) % 4))


class SubscriptionKeysSerializer(serializers.Serializer):
    p256dh = serializers.CharField(max_length=255)
    auth = serializers.CharField(max_length=255)

    def _validate_key(self, value, expected_length, name):
        try:
            raw = decode_base64url(value)
        except (binascii.Error, ValueError):
            raise serializers.ValidationError(f'{name} is not base64url encoded')
        if len(raw) != expected_length:
            raise serializers.ValidationError(f'{name} must decode to {expected_length} bytes')
        return value

    def validate_p256dh(self, value):
        return self._validate_key(value, P256DH_BYTES, 'p256dh')

    def validate_auth(self, value):
        return self._validate_key(value, AUTH_BYTES, 'auth')


class SubscriptionSerializer(serializers.Serializer):
    """
    A browser PushSubscription as produced by ``subscription.toJSON()``.
    Used for: POST /api/push/subscribe
    """
    endpoint = serializers.URLField(max_length=500)
    keys = SubscriptionKeysSerializer()
    expirationTime = serializers.IntegerField(required=False, allow_null=True)


class BroadcastSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200, required=False, default='Test Header')
    body = serializers.CharField(max_length=1000, required=False, default='This is a test notification from the server!')
