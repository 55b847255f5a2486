"""
Due-notification service.

Notifications are not stored: they are computed on demand from the schedules
and the skip ledger, so computing them never writes anything.
"""
from datetime import date, datetime, time
from typing import Collection, Iterable, List, Optional, Tuple
from django.db import IntegrityError, transaction
from django.utils import timezone
from core.services import BaseService
from core.exceptions import NotFoundError
from core.constants import NotificationDefaults
from core.dto import DueNotificationDTO
from maintenance.models import MaintenanceSchedule, MaintenanceNotificationSkip
from maintenance.repositories import MaintenanceScheduleRepository, NotificationSkipRepository


def build_notification(schedule: MaintenanceSchedule, today: date) -> DueNotificationDTO:
    due = schedule.next_due_date
    notify_days = max(0, schedule.notify_before_days or 0)
    notice_start = schedule.notice_start_date
    
    title = schedule.title.strip() if schedule.title and schedule.title.strip() else NotificationDefaults.TITLE
    description = schedule.description or ''
    message = f"{title} is due on {due.isoformat()}"
    if notify_days > 0:
        message += f" ({notify_days}d notice)"
    if description.strip():
        message += f" {description}"
    
    return DueNotificationDTO(
        schedule_id=schedule.id,
        schedule_title=schedule.title,
        schedule_description=description,
        asset_group_id=schedule.asset_group_id,
        asset_group_name=schedule.asset_group_name,
        next_due_date=due,
        cycle_months=schedule.cycle_months,
        notify_days=notify_days,
        notify_at=timezone.make_aware(datetime.combine(notice_start, time.min)),
        overdue=today > due,
        title=title,
        message=message,
        action_url=NotificationDefaults.ACTION_URL.format(schedule_id=schedule.id),
    )


def compute_due_notifications(
    today: date,
    schedules: Iterable[MaintenanceSchedule],
    skipped: Collection[Tuple[int, date]],
) -> List[DueNotificationDTO]:
    """
    Occurrences to surface on `today`.
    
    A schedule is due when it has a next due date, today is on or after
    (next due date - notify_before_days), and (schedule id, next due date)
    is not in `skipped`. There is no upper bound: overdue schedules stay due
    until completed or skipped.
    """
    result = []
    for schedule in schedules:
        due = schedule.next_due_date
        if due is None:
            continue
        if today < schedule.notice_start_date:
            continue
        if (schedule.id, due) in skipped:
            continue
        result.append(build_notification(schedule, today))
    
    result.sort(key=lambda n: (n.notify_at, n.schedule_id))
    return result


class DueNotificationComputer(BaseService):
    """Loads schedules and skips, then evaluates the due window"""
    
    def __init__(self, clock=None):
        super().__init__(clock)
        self.schedule_repo = MaintenanceScheduleRepository()
        self.skip_repo = NotificationSkipRepository()
    
    def compute(self, today: Optional[date] = None) -> List[DueNotificationDTO]:
        today = today or self.clock.today()
        schedules = list(self.schedule_repo.get_pending())
        skipped = self.skip_repo.skipped_pending_pairs()
        return compute_due_notifications(today, schedules, skipped)


class NotificationService(BaseService):
    """Due notifications and per-occurrence dismissal"""
    
    def __init__(self, clock=None):
        super().__init__(clock)
        self.schedule_repo = MaintenanceScheduleRepository()
        self.skip_repo = NotificationSkipRepository()
        self.computer = DueNotificationComputer(clock)
    
    def get_due_notifications(self, today: Optional[date] = None) -> List[DueNotificationDTO]:
        return self.computer.compute(today)
    
    def is_skipped(self, schedule_id: int, due_date: date) -> bool:
        return self.skip_repo.exists_for(schedule_id, due_date)
    
    def skip(self, schedule_id: int, due_date: date) -> Tuple[MaintenanceNotificationSkip, bool]:
        """
        Dismiss the occurrence of a schedule due on due_date.
        
        Idempotent: dismissing an already dismissed occurrence returns the
        existing row with created=False. The schedule itself is not changed.
        
        Raises:
            NotFoundError: If the schedule doesn't exist
        """
        if not self.schedule_repo.exists(id=schedule_id):
            raise NotFoundError(resource_type="MaintenanceSchedule", resource_id=schedule_id)
        
        existing = self.skip_repo.get_all(schedule_id=schedule_id, due_date=due_date).first()
        if existing:
            return existing, False
        
        try:
            with transaction.atomic():
                skip = self.skip_repo.record(schedule_id, due_date, self.clock.now())
        except IntegrityError:
            # Lost the race to a concurrent dismissal of the same occurrence
            return self.skip_repo.get_all(schedule_id=schedule_id, due_date=due_date).get(), False
        
        self.log_info("Maintenance notification skipped", schedule_id=schedule_id, due_date=due_date)
        return skip, True
