"""
WSGI config for Injaz project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "Injaz.settings")

application = get_wsgi_application()
