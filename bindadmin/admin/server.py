from django.contrib import admin

from bindadmin.models import Server


@admin.register(Server)
class ServerAdmin(admin.ModelAdmin):
    list_display = ('hostname', 'ip_address', 'type', 'directory', 'ns_record', 'push_updates',
                    'active')
    list_filter = ('type', 'active')
    search_fields = ('hostname', 'ip_address')
    fieldsets = (
        (None, {'fields': ('hostname', 'ip_address', 'type', 'active')}),
        ('Publishing', {'fields': ('ns_record', 'push_updates')}),
        ('Configuration', {'fields': ('directory', 'template', 'script')}),
    )
