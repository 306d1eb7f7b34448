import uuid

from django.conf import settings
from django.db import models


class PushSubscription(models.Model):
    """A browser's Web Push endpoint and its encryption keys"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='push_subscriptions')
    endpoint = models.URLField(max_length=500)
    p256dh = models.CharField(max_length=255)
    auth = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'push_subscriptions'
        verbose_name = 'Push Subscription'
        verbose_name_plural = 'Push Subscriptions'
        constraints = [
            models.UniqueConstraint(fields=['user', 'endpoint'], name='push_sub_user_endpoint_uniq'),
        ]

    def __str__(self):
        return f"{self.user_id} {self.endpoint[:60]}"

    def as_subscription_info(self):
        return {
            'endpoint': self.endpoint,
            'keys': {'p256dh': self.p256dh, 'auth': self.auth},
        }
