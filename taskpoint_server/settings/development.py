"""
Development settings for taskpoint_server project.
"""

from decouple import config
from .base import *

DEBUG = config('DEBUG', default=True, cast=bool)

# Browsable API is handy when poking at endpoints locally
REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [
    'rest_framework.renderers.JSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
]

LOGGING['handlers']['console']['level'] = config('LOG_LEVEL', default='DEBUG')
LOGGING['root']['level'] = config('LOG_LEVEL', default='DEBUG')
