from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from bindadmin import activity
from bindadmin.models import Zone


@receiver(post_save, sender=Zone)
def log_zone_save(instance, created, update_fields=None, raw=False, **kwargs):
    # bookkeeping saves (serial, pending flag, soft delete) go through update_fields
    if raw or update_fields:
        return
    activity.log_activity(activity.CREATED if created else activity.UPDATED, instance)


@receiver(post_delete, sender=Zone)
def log_zone_delete(instance, **kwargs):
    # the row is gone, keep only the domain
    activity.log_activity(activity.DELETED, instance, attach=False)
