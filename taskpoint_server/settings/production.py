"""
Production settings for taskpoint_server project.
"""

from decouple import config
from .base import *

DEBUG = False

if SECRET_KEY.startswith('django-insecure'):
    raise RuntimeError('SECRET_KEY must be set to a strong random value in production')

# Served behind a TLS-terminating reverse proxy
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_SSL_REDIRECT = config('SECURE_SSL_REDIRECT', default=True, cast=bool)
SECURE_REDIRECT_EXEMPT = [r'^health/$']
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# Only the configured client origins may call the API
CORS_ALLOW_ALL_ORIGINS = False

LOGGING['handlers']['file']['level'] = 'WARNING'
LOGGING['root']['level'] = config('LOG_LEVEL', default='WARNING')
