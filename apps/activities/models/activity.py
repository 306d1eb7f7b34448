import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


DEFAULT_ICON = 'zap'


class Activity(models.Model):
    """A user's reusable template for logging an earning"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='activities')
    name = models.CharField(max_length=100)
    point_value = models.IntegerField(validators=[MinValueValidator(1)])
    icon = models.CharField(max_length=50, default=DEFAULT_ICON)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'activities'
        ordering = ['created_at', 'id']
        verbose_name = 'Activity'
        verbose_name_plural = 'Activities'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='activities_user_created_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.point_value} points)"
