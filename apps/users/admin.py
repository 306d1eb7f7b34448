from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ['email', 'name', 'is_admin', 'is_active', 'created_at']
    list_filter = ['is_admin', 'is_active', 'created_at']
    search_fields = ['email', 'name']
    ordering = ['-created_at']
    fields = ['id', 'email', 'name', 'is_admin', 'is_active', 'is_staff', 'last_login', 'created_at', 'updated_at']
    readonly_fields = ['id', 'last_login', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False  # Accounts are created through signup or make_admin
