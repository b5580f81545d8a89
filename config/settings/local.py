"""
Local development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

LOG_LEVEL = 'DEBUG'
LOGGING['loggers']['apps']['level'] = LOG_LEVEL  # noqa: F405
