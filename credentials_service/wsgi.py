"""WSGI entry point for the credentials service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "credentials_service.settings")

application = get_wsgi_application()
