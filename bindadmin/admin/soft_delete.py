from django.core.exceptions import PermissionDenied
from django.contrib import admin
from django.contrib.admin.actions import delete_selected as delete_selected_


@admin.action(description="Delete selected")
def delete_selected(modeladmin, request, queryset):
    if not modeladmin.has_delete_permission(request):
        raise PermissionDenied
    if request.POST.get('post'):
        for obj in queryset:
            obj.soft_delete()
    else:
        return delete_selected_(modeladmin, request, queryset)


@admin.action(description="Restore selected")
def restore_selected(modeladmin, request, queryset):
    for obj in queryset.filter(deleted=True):
        obj.restore()


class SoftDeleteAdmin(admin.ModelAdmin):
    actions = (delete_selected, restore_selected)

    def delete_model(self, request, obj):
        """Soft delete the object, it can be restored later"""
        obj.soft_delete()

    @admin.display(description='Deleted')
    def is_deleted(self, obj):
        return "DELETED" if obj.deleted else ""
