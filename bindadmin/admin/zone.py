import logging

from django.contrib import admin
from django.db import transaction

from bindadmin.models import Record, Zone

from .soft_delete import SoftDeleteAdmin

logger = logging.getLogger('bindadmin.admin')


class RecordInline(admin.TabularInline):
    model = Record
    extra = 0
    fields = ('name', 'ttl', 'type', 'priority', 'data')


@admin.action(description="Raise serial number")
def raise_serial(modeladmin, request, queryset):
    for zone in queryset:
        zone.raise_serial_number(force=True)


@admin.register(Zone)
class ZoneAdmin(SoftDeleteAdmin):
    list_filter = ('has_modifications', 'custom_settings', 'deleted')
    list_display = ('domain', 'zone_type', 'serial', 'has_modifications', 'is_deleted')
    fields = ('domain', 'serial', 'master_server', 'custom_settings', 'refresh', 'retry',
              'expire', 'negative_ttl', 'default_ttl', 'has_modifications')
    readonly_fields = ('serial', 'has_modifications')
    search_fields = ('domain', 'master_server')
    inlines = (RecordInline,)
    actions = SoftDeleteAdmin.actions + (raise_serial,)

    def get_readonly_fields(self, request, obj=None):
        if obj:
            return self.readonly_fields + ('domain',)
        return self.readonly_fields

    @transaction.atomic
    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        if change and (form.has_changed() or any(formset.has_changed() for formset in formsets)):
            serial = form.instance.raise_serial_number()
            logger.info('%s changed from the admin, serial %s', form.instance, serial)

    @admin.display(description='Type')
    def zone_type(self, obj):
        return obj.get_type_of_zone()
