"""
Background task scheduler for the daily maintenance due scan.
Uses APScheduler to run tasks in the background without requiring external services.
"""
import logging
import atexit
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from django.conf import settings
from django.core.management import call_command
from django.utils import timezone

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = None


def scan_due_maintenance_job():
    """
    Background job that evaluates due maintenance notifications.
    Read-only: it only logs what is due.
    """
    try:
        logger.info("Starting scheduled maintenance due scan...")
        call_command('scan_due_maintenance')
        logger.info("Scheduled maintenance due scan completed successfully")
    except Exception as e:
        # Keep the scheduler thread alive; the next run retries
        logger.error(f"Error in scheduled maintenance due scan: {str(e)}", exc_info=True)


def start_scheduler():
    """
    Initialize and start the background scheduler.
    This should be called once when Django starts.
    """
    global scheduler
    
    if scheduler is not None and scheduler.running:
        logger.warning("Scheduler is already running")
        return
    
    hour = getattr(settings, 'MAINTENANCE_DUE_SCAN_HOUR', 8)
    minute = getattr(settings, 'MAINTENANCE_DUE_SCAN_MINUTE', 0)
    tz = timezone.get_current_timezone()
    
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        scan_due_maintenance_job,
        trigger=CronTrigger(hour=hour, minute=minute, timezone=tz),
        id='scan_due_maintenance',
        name='Scan Due Maintenance Schedules',
        replace_existing=True,
        max_instances=1,  # Prevent overlapping runs
        coalesce=True  # Combine multiple pending executions into one
    )
    scheduler.start()
    logger.info(f"Background scheduler started; due scan at {hour:02d}:{minute:02d} ({tz})")
    
    atexit.register(stop_scheduler)


def stop_scheduler():
    """
    Stop the background scheduler.
    Should be called when Django shuts down.
    """
    global scheduler
    
    if scheduler is not None and scheduler.running:
        try:
            scheduler.shutdown(wait=True)
            logger.info("Background scheduler stopped")
        finally:
            scheduler = None
