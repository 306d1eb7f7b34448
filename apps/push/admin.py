from django.contrib import admin
from .models import PushSubscription


@admin.register(PushSubscription)
class PushSubscriptionAdmin(admin.ModelAdmin):
    list_display = ['user', 'endpoint', 'created_at', 'updated_at']
    search_fields = ['user__email', 'endpoint']
    readonly_fields = ['endpoint', 'p256dh', 'auth', 'created_at', 'updated_at']
