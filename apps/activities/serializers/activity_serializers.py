"""
Activity serializers.
"""
from rest_framework import serializers
from ..models import Activity


class ActivitySerializer(serializers.ModelSerializer):
    """
    Activity in the client's wire shape: ``value`` is the point value,
    ``user_id`` the owner.
    Used for: GET/POST /api/activities, PUT/PATCH /api/activities/<id>
    """
    user_id = serializers.UUIDField(read_only=True)
    value = serializers.IntegerField(source='point_value', min_value=1)
    icon = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Activity
        fields = ['id', 'user_id', 'name', 'value', 'icon', 'created_at']
        read_only_fields = ['id', 'user_id', 'created_at']
