from django.conf import settings
from django.contrib import admin

from bindadmin.models import Setting


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    list_display = ('key', 'value', 'default')

    def default(self, obj):
        return settings.BINDADMIN_DEFAULTS.get(obj.key, '')
