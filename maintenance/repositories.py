"""
Maintenance repositories - Data access layer for schedules and notification skips.
"""
from datetime import date, datetime
from typing import Set, Tuple
from django.db.models import QuerySet, F
from core.repositories import BaseRepository
from .models import MaintenanceSchedule, MaintenanceNotificationSkip


class MaintenanceScheduleRepository(BaseRepository[MaintenanceSchedule]):
    """Repository for MaintenanceSchedule model"""
    
    def __init__(self):
        super().__init__(MaintenanceSchedule)
    
    def get_queryset(self) -> QuerySet[MaintenanceSchedule]:
        return self.model.objects.select_related('asset_group')
    
    def get_all_ordered(self) -> QuerySet[MaintenanceSchedule]:
        """All schedules, soonest due first, dormant ones last"""
        return self.get_queryset().order_by(F('next_due_at').asc(nulls_last=True), 'id')
    
    def find_upcoming(self, window_start: datetime, window_end: datetime) -> QuerySet[MaintenanceSchedule]:
        """Schedules whose next due falls in [window_start, window_end]"""
        return self.get_queryset().filter(
            next_due_at__gte=window_start,
            next_due_at__lte=window_end,
        ).order_by('next_due_at', 'id')
    
    def get_pending(self) -> QuerySet[MaintenanceSchedule]:
        """Schedules that have an occurrence to notify about"""
        return self.get_queryset().filter(next_due_at__isnull=False).order_by('next_due_at', 'id')


class NotificationSkipRepository(BaseRepository[MaintenanceNotificationSkip]):
    """Repository for MaintenanceNotificationSkip model"""
    
    def __init__(self):
        super().__init__(MaintenanceNotificationSkip)
    
    def exists_for(self, schedule_id: int, due_date: date) -> bool:
        """Has this occurrence been dismissed?"""
        return self.exists(schedule_id=schedule_id, due_date=due_date)
    
    def record(self, schedule_id: int, due_date: date, skipped_at: datetime) -> MaintenanceNotificationSkip:
        """Insert a dismissal row"""
        return self.create(schedule_id=schedule_id, due_date=due_date, skipped_at=skipped_at)
    
    def skipped_pending_pairs(self) -> Set[Tuple[int, date]]:
        """(schedule_id, due_date) pairs dismissed for schedules that still have a next due"""
        return set(
            self.get_all(schedule__next_due_at__isnull=False).values_list('schedule_id', 'due_date')
        )
