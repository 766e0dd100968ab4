"""Development settings for the hotel booking service.

Extends the base settings with debug mode, permissive hosts and eager
Celery execution so log shipping works without a running broker. Do not
use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

# Run log-shipping tasks inline during development
CELERY_TASK_ALWAYS_EAGER = True
