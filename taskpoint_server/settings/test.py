"""
Test settings for taskpoint_server project.
"""

import tempfile
from pathlib import Path

from .base import *

# File-backed SQLite so threads in the concurrency tests get real separate connections
_TEST_DB_DIR = Path(tempfile.gettempdir())

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': str(_TEST_DB_DIR / 'taskpoint.sqlite3'),
        'OPTIONS': {
            'transaction_mode': 'IMMEDIATE',
            'timeout': 30,
        },
        'TEST': {
            'NAME': str(_TEST_DB_DIR / 'taskpoint_test.sqlite3'),
        },
    }
}


# Disable migrations for faster testing
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

# Use faster password hasher for testing
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

SECRET_KEY = 'taskpoint-test-secret-key-with-enough-length-for-hs256'
SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY

GOOGLE_CLIENT_ID = ['test-client.apps.googleusercontent.com']
VAPID_PUBLIC_KEY = 'test-public-key'
VAPID_PRIVATE_KEY = 'test-private-key'

# Disable logging during tests
LOGGING_CONFIG = None
