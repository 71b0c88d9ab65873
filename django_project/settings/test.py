from django_project.settings import *  # noqa

SECRET_KEY = 'test-secret'
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

REST_FRAMEWORK.update({  # noqa: F405
    'DEFAULT_RENDERER_CLASSES': ('rest_framework.renderers.JSONRenderer',)
})

LOGGING['loggers']['bindadmin']['level'] = 'WARN'  # noqa: F405
