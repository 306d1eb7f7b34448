"""
User serializers for the public profile and the admin summary.
"""
from rest_framework import serializers
from ..models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Public user shape returned by auth endpoints.
    Never includes the credential hash.
    """

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'is_admin', 'created_at']
        read_only_fields = fields


class AdminUserSummarySerializer(UserSerializer):
    """
    User row with ledger totals for GET /api/admin/users.
    Expects a queryset annotated with total_earned and total_spent.
    """
    total_earned = serializers.IntegerField(read_only=True)
    total_spent = serializers.IntegerField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['total_earned', 'total_spent']
        read_only_fields = fields
