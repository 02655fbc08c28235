"""Development settings for the TMB service.

Debug on, every host allowed and emails printed to the console. Celery
runs tasks inline unless ``CELERY_TASK_ALWAYS_EAGER=false`` and a broker
is available.
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

CELERY_TASK_ALWAYS_EAGER = get_env('CELERY_TASK_ALWAYS_EAGER', 'true').lower() == 'true'  # noqa: F405
