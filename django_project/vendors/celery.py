import os

import celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django_project.settings")


app = celery.Celery('bindadmin')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
