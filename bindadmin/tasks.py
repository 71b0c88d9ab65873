import redis

from celery import shared_task
from celery.utils.log import get_task_logger
from django.conf import settings

from bindadmin import push

logger = get_task_logger(__name__)


@shared_task(bind=True, ignore_result=True)
def push_updates(self):
    """
    Periodic task that pushes the configuration of the zones with pending changes
    """
    redis_client = redis.from_url(settings.LOCK_SERVER_URL)
    lock = redis_client.lock('push_updates', timeout=300)

    if not lock.acquire(blocking=False):
        logger.info('Cannot acquire task lock. Probably another push is running. Bailing out.')
        return

    try:
        zones = push.push_updates()
        if zones:
            logger.info('Pushed %d zones', len(zones))
    except Exception:
        logger.exception("Push of pending changes failed")
    finally:
        lock.release()
