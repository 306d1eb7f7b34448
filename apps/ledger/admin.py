from django.contrib import admin
from .models import LogEntry, Redemption


class ReadOnlyLedgerAdmin(admin.ModelAdmin):
    """Ledger rows are append-only; the admin site can only browse them"""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(LogEntry)
class LogEntryAdmin(ReadOnlyLedgerAdmin):
    list_display = ['user', 'activity_name', 'points', 'timestamp']
    list_filter = ['timestamp']
    search_fields = ['user__email', 'activity_name']
    ordering = ['-timestamp']


@admin.register(Redemption)
class RedemptionAdmin(ReadOnlyLedgerAdmin):
    list_display = ['user', 'reward_name', 'cost', 'timestamp']
    list_filter = ['timestamp']
    search_fields = ['user__email', 'reward_name']
    ordering = ['-timestamp']
