"""Production settings for the TMB service.

Secrets, hosts and SMTP credentials come from the environment; a missing
``DJANGO_SECRET_KEY`` stops startup.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)  # noqa: F405

ALLOWED_HOSTS = [host for host in get_env('DJANGO_ALLOWED_HOSTS', '').split(',') if host]  # noqa: F405

# Behind a TLS-terminating proxy
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True

# SMTP delivery (Gmail by default)
EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
EMAIL_HOST = get_env('EMAIL_HOST', 'smtp.gmail.com')  # noqa: F405
EMAIL_PORT = int(get_env('EMAIL_PORT', 587))  # noqa: F405
EMAIL_USE_TLS = get_env('EMAIL_USE_TLS', 'true').lower() == 'true'  # noqa: F405
EMAIL_HOST_USER = get_env('EMAIL_HOST_USER', '')  # noqa: F405
EMAIL_HOST_PASSWORD = get_env('EMAIL_HOST_PASSWORD', '')  # noqa: F405
EMAIL_TIMEOUT = int(get_env('EMAIL_TIMEOUT', 10))  # noqa: F405
