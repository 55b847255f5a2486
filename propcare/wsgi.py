"""
WSGI config for propcare project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'propcare.settings')

application = get_wsgi_application()
