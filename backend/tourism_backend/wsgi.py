"""
WSGI config for the tourism path planner API.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tourism_backend.settings")

application = get_wsgi_application()
