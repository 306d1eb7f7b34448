from django.contrib import admin
from .models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'point_value', 'icon', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'user__email']
    readonly_fields = ['created_at']
