"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

ORDERS = {
    **ORDERS,  # noqa: F405
    'TRANSITION_POLICY': 'permissive',
    'LOCK_TERMINAL_ORDERS': True,
    'CHARGE_CUSTOMIZATION': False,
}

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405
