"""
Settings module tests.
"""
from django.conf import settings

from config.settings import base


class TestLocalSettings:

    def test_local_raises_apps_log_level(self):
        assert settings.LOGGING['loggers']['apps']['level'] == 'DEBUG'

    def test_local_leaves_base_logging_untouched(self):
        assert base.LOGGING['loggers']['apps']['level'] == base.LOG_LEVEL
        assert settings.LOGGING is not base.LOGGING
