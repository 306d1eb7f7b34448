import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from .base import ImmutableLedgerRow


class Redemption(ImmutableLedgerRow):
    """A points-spending event"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='redemptions')
    reward_name = models.CharField(max_length=100)
    cost = models.IntegerField()
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'ledger_redemptions'
        ordering = ['-timestamp']
        verbose_name = 'Redemption'
        verbose_name_plural = 'Redemptions'
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='ledger_red_user_ts_idx'),
            models.Index(fields=['timestamp'], name='ledger_red_ts_idx'),
        ]

    def __str__(self):
        return f"{self.user_id} -{self.cost} ({self.reward_name})"
