"""
Management command to list maintenance schedules that are due for notification.
Read-only: nothing is created, completed or skipped.

Usage:
    python manage.py scan_due_maintenance
    python manage.py scan_due_maintenance --date 2025-02-25

Can be added to crontab instead of the in-process scheduler:
    0 8 * * * cd /path/to/project && python manage.py scan_due_maintenance

The in-process scheduler only starts inside the `runserver` autoreloader
child (RUN_MAIN=true). Under gunicorn/uwsgi or `runserver --noreload` it
never starts, so those deployments must run this command from cron.
"""
import logging
from django.core.management.base import BaseCommand, CommandError
from core.clock import FixedClock
from core.exceptions import ValidationError
from core.validators import DateValidator
from notifications.services import NotificationService

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'List maintenance schedules whose notice window has started'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            help='Evaluate as of this date (YYYY-MM-DD) instead of today',
        )

    def handle(self, *args, **options):
        clock = None
        if options.get('date'):
            try:
                clock = FixedClock(DateValidator.parse_date(options['date'], 'date'))
            except ValidationError as e:
                raise CommandError(e.message)
        
        service = NotificationService(clock=clock)
        today = service.clock.today()
        notifications = service.get_due_notifications(today)
        
        self.stdout.write(f"\n{'='*60}")
        self.stdout.write(f"  MAINTENANCE DUE SCAN - {today.isoformat()}")
        self.stdout.write(f"{'='*60}\n")
        
        overdue_count = 0
        for notification in notifications:
            line = f"  #{notification.schedule_id} {notification.message}"
            if notification.asset_group_name:
                line += f" [{notification.asset_group_name}]"
            if notification.overdue:
                overdue_count += 1
                self.stdout.write(self.style.WARNING(f"{line} - OVERDUE"))
            else:
                self.stdout.write(line)
        
        self.stdout.write(f"\n{'='*60}")
        self.stdout.write("  SUMMARY")
        self.stdout.write(f"{'='*60}")
        self.stdout.write(f"  Due: {len(notifications)}")
        self.stdout.write(f"  Overdue: {overdue_count}")
        self.stdout.write(f"{'='*60}\n")
        
        logger.info(f"Maintenance due scan for {today}: {len(notifications)} due, {overdue_count} overdue")
