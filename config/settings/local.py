"""
Local development settings.
"""
import copy

from .base import *  # noqa: F401,F403

DEBUG = True

LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'DEBUG'
