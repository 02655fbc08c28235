"""Settings used by the test suite."""

import tempfile
from pathlib import Path

from .base import *  # noqa: F401,F403

SQLITE_TEST_FILE = str(Path(tempfile.gettempdir()) / 'tmb-test.sqlite3')

DEBUG = False

SECRET_KEY = 'test-secret-key'

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': get_env('TEST_DB_ENGINE', 'django.db.backends.sqlite3'),  # noqa: F405
        'NAME': get_env('TEST_DB_NAME', SQLITE_TEST_FILE),  # noqa: F405
        'USER': get_env('TEST_DB_USER', ''),  # noqa: F405
        'PASSWORD': get_env('TEST_DB_PASSWORD', ''),  # noqa: F405
        'HOST': get_env('TEST_DB_HOST', ''),  # noqa: F405
        'PORT': get_env('TEST_DB_PORT', ''),  # noqa: F405
    }
}

# A file database, so threads in the race tests share one store.
if DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':
    DATABASES['default']['OPTIONS'] = SQLITE_OPTIONS  # noqa: F405
    DATABASES['default']['TEST'] = {
        'NAME': DATABASES['default']['NAME'],
    }

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
DEFAULT_FROM_EMAIL = 'TMB <noreply@example.com>'
ADMIN_NOTIFICATION_EMAIL = 'owner@example.com'
ADMIN_SECRET = 'test-admin-secret'
NOTIFICATION_SINK = 'apps.notifications.sinks.EmailNotificationSink'

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'CRITICAL'  # noqa: F405
