"""ASGI config for the hotel booking service.

Production servers should set DJANGO_SETTINGS_MODULE explicitly; the
development settings are used by default.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
