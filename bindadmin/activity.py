"""Audit trail of the changes made to zones."""
from logging import getLogger

logger = getLogger(__name__)

CREATED = 'created'
UPDATED = 'updated'
DELETED = 'deleted'
RESTORED = 'restored'

DESCRIPTIONS = {
    CREATED: "Zone '{domain}' has been created.",
    UPDATED: "Zone '{domain}' has been updated.",
    DELETED: "Zone '{domain}' has been deleted.",
    RESTORED: "Zone '{domain}' has been restored.",
}


def get_description(event, domain):
    return DESCRIPTIONS[event].format(domain=domain)


def log_activity(event, zone, attach=True):
    from bindadmin.models import ActivityLog

    description = get_description(event, zone.domain)
    logger.info(description)
    return ActivityLog.objects.create(
        event=event,
        domain=zone.domain,
        description=description,
        zone=zone if attach else None,
    )
