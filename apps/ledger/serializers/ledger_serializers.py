"""
Ledger serializers.

Request bodies use the client's camelCase keys; responses use snake_case.
"""
from rest_framework import serializers
from ..models import LogEntry, Redemption


class LogEntrySerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    activity_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = LogEntry
        fields = ['id', 'user_id', 'activity_id', 'activity_name', 'points', 'timestamp']
        read_only_fields = fields


class LogEntryCreateSerializer(serializers.Serializer):
    """
    Body of POST /api/logs.

    With ``activityId`` the name and points come from the stored activity
    and any client-sent values are ignored. Without it, both
    ``activityName`` and ``points`` are required.
    """
    activityId = serializers.UUIDField(required=False, allow_null=True)
    activityName = serializers.CharField(max_length=100, required=False, allow_blank=False)
    points = serializers.IntegerField(required=False, min_value=1)

    def validate(self, attrs):
        if attrs.get('activityId'):
            return attrs

        missing = [key for key in ('activityName', 'points') if attrs.get(key) is None]
        if missing:
            raise serializers.ValidationError(
                f"{' and '.join(missing)} required when activityId is not given"
            )
        return attrs


class RedemptionSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Redemption
        fields = ['id', 'user_id', 'reward_name', 'cost', 'timestamp']
        read_only_fields = fields


class RedemptionCreateSerializer(serializers.Serializer):
    rewardName = serializers.CharField(max_length=100)
    cost = serializers.IntegerField(min_value=1)


class BalanceSerializer(serializers.Serializer):
    balance = serializers.IntegerField()
    today_earned = serializers.IntegerField()
    total_earned = serializers.IntegerField()
    total_spent = serializers.IntegerField()
