# awg_warp_service/wsgi.py
# Entry point for WSGI servers, e.g. `gunicorn awg_warp_service.wsgi:app`.
from .common.config import Settings
from .common.utils import configure_logging
from .server import create_app

settings = Settings.from_env()
configure_logging(settings.log_level)
app = create_app(settings)
