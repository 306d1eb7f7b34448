import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from .base import ImmutableLedgerRow


class LogEntry(ImmutableLedgerRow):
    """
    A points-earning event.

    activity_name and points are snapshots taken when the entry was
    recorded; later edits to the activity, or its deletion, leave them alone.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='log_entries')
    activity = models.ForeignKey(
        'activities.Activity',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='log_entries',
    )
    activity_name = models.CharField(max_length=100)
    points = models.IntegerField()
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'ledger_log_entries'
        ordering = ['-timestamp']
        verbose_name = 'Log Entry'
        verbose_name_plural = 'Log Entries'
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='ledger_log_user_ts_idx'),
            models.Index(fields=['timestamp'], name='ledger_log_ts_idx'),
        ]

    def __str__(self):
        return f"{self.user_id} +{self.points} ({self.activity_name})"
