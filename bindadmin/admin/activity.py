from django.contrib import admin

from bindadmin.models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'event', 'domain', 'description')
    list_filter = ('event',)
    search_fields = ('domain',)
    readonly_fields = ('created_at', 'event', 'domain', 'description', 'zone')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
