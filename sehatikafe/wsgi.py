"""
WSGI config for the sehatikafe project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sehatikafe.settings")

application = get_wsgi_application()
