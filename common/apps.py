from django.apps import AppConfig
import logging
import os
import sys

logger = logging.getLogger(__name__)


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'common'
    
    def ready(self):
        """
        Initialize background scheduler when Django app is ready.
        Only start scheduler in the main process (not in migrations, tests, or worker processes).
        """
        # Only the runserver autoreloader child runs the scheduler; WSGI servers
        # and --noreload rely on cron calling scan_due_maintenance instead
        if os.environ.get('RUN_MAIN') != 'true':
            return
        
        # Skip if running management commands (except runserver)
        if len(sys.argv) > 1 and sys.argv[1] in ['migrate', 'makemigrations', 'test', 'collectstatic', 'shell']:
            return
        
        from django.conf import settings
        if not getattr(settings, 'ENABLE_BACKGROUND_SCHEDULER', True):
            logger.info("Background task scheduler disabled by settings")
            return
        
        from .scheduler import start_scheduler
        start_scheduler()
        logger.info("Background task scheduler initialized")
