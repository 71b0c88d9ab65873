"""
Django settings for the bindadmin project.

Every value can be overridden from the environment; a `local_settings` module
on the python path replaces this file entirely.
"""
import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def env_bool(name, default=False):
    return os.getenv(name, str(default)).lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.getenv('SECRET_KEY', '')

DEBUG = env_bool('DEBUG')

ALLOWED_HOSTS = [host for host in os.getenv('ALLOWED_HOSTS', '').split(',') if host]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'bindadmin.apps.BindAdminConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'django_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'django_project.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': os.getenv('DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.getenv('DB_NAME', os.path.join(BASE_DIR, 'db.sqlite3')),
        'USER': os.getenv('DB_USER', ''),
        'PASSWORD': os.getenv('DB_PASSWORD', ''),
        'HOST': os.getenv('DB_HOST', ''),
        'PORT': os.getenv('DB_PORT', ''),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.getenv('TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = os.getenv('STATIC_ROOT', os.path.join(BASE_DIR, 'static'))
SERVE_STATIC = env_bool('SERVE_STATIC')

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework.authentication.SessionAuthentication',
        'rest_framework.authentication.BasicAuthentication',
    ),
    'EXCEPTION_HANDLER': 'bindadmin.middleware.custom_exception_handler',
}

# Celery
CELERY_BROKER_URL = os.getenv('BROKER_URL', 'redis://localhost:6379/0')
CELERY_TASK_SERIALIZER = 'json'
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_ALWAYS_EAGER = env_bool('CELERY_ALWAYS_EAGER')
CELERY_BEAT_SCHEDULE = {
    'push_updates': {
        'task': 'bindadmin.tasks.push_updates',
        'schedule': int(os.getenv('BINDADMIN_PUSH_INTERVAL', 300)),
    },
}

LOCK_SERVER_URL = os.getenv('LOCK_SERVER_URL', 'redis://localhost:6379/1')

# Zone defaults, overridable at runtime from the admin (Settings).
BINDADMIN_DEFAULTS = {
    'zone_default_mname': os.getenv('ZONE_DEFAULT_MNAME', 'dns1.example.com'),
    'zone_default_rname': os.getenv('ZONE_DEFAULT_RNAME', 'hostmaster@example.com'),
    'zone_default_refresh': int(os.getenv('ZONE_DEFAULT_REFRESH', 86400)),
    'zone_default_retry': int(os.getenv('ZONE_DEFAULT_RETRY', 7200)),
    'zone_default_expire': int(os.getenv('ZONE_DEFAULT_EXPIRE', 3628800)),
    'zone_default_negative_ttl': int(os.getenv('ZONE_DEFAULT_NEGATIVE_TTL', 7200)),
    'zone_default_default_ttl': int(os.getenv('ZONE_DEFAULT_DEFAULT_TTL', 172800)),
}

# Local directory the push transport writes generated configuration to.
BINDADMIN_PUSH_DIR = os.getenv('BINDADMIN_PUSH_DIR', os.path.join(BASE_DIR, 'push'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'bindadmin': {
            'handlers': ['console'],
            'level': os.getenv('BINDADMIN_LOG_LEVEL', 'INFO'),
        },
        'celery': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}
