"""
Maintenance schedule service - Business logic for recurring maintenance.
Covers schedule CRUD, the upcoming list and completion (mark done).
"""
from datetime import timedelta
from typing import List, Optional
from dateutil.relativedelta import relativedelta
from django.conf import settings
from django.db import transaction
from django.utils import timezone
from core.services import BaseService
from core.exceptions import NotFoundError
from core.validators import ScheduleValidator, DateValidator
from core.constants import DefaultLimits
from core.dto import MaintenanceScheduleDTO
from asset_groups.services import AssetGroupService
from .repositories import MaintenanceScheduleRepository
from .models import MaintenanceSchedule


def advance_due(done_at, cycle_months):
    """Next due after completing at done_at, or None for non-recurring schedules"""
    if cycle_months and cycle_months > 0:
        return done_at + relativedelta(months=cycle_months)
    return None


class MaintenanceScheduleService(BaseService):
    """Service for maintenance schedule business logic"""
    
    def __init__(self, clock=None):
        super().__init__(clock)
        self.schedule_repo = MaintenanceScheduleRepository()
        self.asset_group_service = AssetGroupService(clock)
    
    def _validate(self, data: MaintenanceScheduleDTO):
        ScheduleValidator.validate_scope(data.scope, data.asset_group_id)
        ScheduleValidator.validate_cycle_months(data.cycle_months)
        ScheduleValidator.validate_notify_before_days(data.notify_before_days)
    
    def _fields(self, data: MaintenanceScheduleDTO) -> dict:
        return {
            'scope': data.scope,
            'asset_group': self.asset_group_service.resolve(data.asset_group_id),
            'cycle_months': data.cycle_months,
            'notify_before_days': data.notify_before_days or 0,
            'title': data.title or '',
            'description': data.description or '',
            'last_done_at': data.last_done_at,
            'next_due_at': data.next_due_at,
        }
    
    def create_schedule(self, data: MaintenanceScheduleDTO) -> MaintenanceSchedule:
        """
        Create a new schedule.
        
        next_due_at is stored exactly as supplied (possibly None); it is not
        derived from cycle_months.
        
        Raises:
            ValidationError: On malformed input
            NotFoundError: If the asset group doesn't exist
        """
        self._validate(data)
        
        with transaction.atomic():
            schedule = self.schedule_repo.create(**self._fields(data))
            self.log_info(f"Maintenance schedule created: {schedule.title}", schedule_id=schedule.id)
            return schedule
    
    def update_schedule(self, schedule_id: int, data: MaintenanceScheduleDTO) -> MaintenanceSchedule:
        """
        Replace every mutable field of a schedule.
        
        Raises:
            NotFoundError: If the schedule or asset group doesn't exist
            ValidationError: On malformed input
        """
        self._validate(data)
        
        with transaction.atomic():
            schedule = self.schedule_repo.get_for_update(schedule_id)
            if not schedule:
                raise NotFoundError(resource_type="MaintenanceSchedule", resource_id=schedule_id)
            
            self.schedule_repo.update(schedule, **self._fields(data))
            self.log_info(f"Maintenance schedule updated: {schedule.title}", schedule_id=schedule.id)
            return schedule
    
    def get_schedule(self, schedule_id: int) -> MaintenanceSchedule:
        schedule = self.schedule_repo.get_by_id(schedule_id)
        if not schedule:
            raise NotFoundError(resource_type="MaintenanceSchedule", resource_id=schedule_id)
        return schedule
    
    def get_all_schedules(self) -> List[MaintenanceSchedule]:
        return list(self.schedule_repo.get_all_ordered())
    
    def delete_schedule(self, schedule_id: int) -> bool:
        """
        Delete a schedule. Its notification skips go with it (FK cascade).
        
        Raises:
            NotFoundError: If the schedule doesn't exist
        """
        with transaction.atomic():
            schedule = self.schedule_repo.get_for_update(schedule_id)
            if not schedule:
                raise NotFoundError(resource_type="MaintenanceSchedule", resource_id=schedule_id)
            
            result = self.schedule_repo.delete(schedule)
            self.log_info("Maintenance schedule deleted", schedule_id=schedule_id)
            return result
    
    def mark_done(self, schedule_id: int) -> MaintenanceSchedule:
        """
        Complete the pending occurrence now.
        
        last_done_at becomes now (whole seconds). Recurring schedules move
        next_due_at forward by cycle_months calendar months; others go dormant.
        Notification skips are left alone.
        
        Raises:
            NotFoundError: If the schedule doesn't exist
        """
        with transaction.atomic():
            schedule = self.schedule_repo.get_for_update(schedule_id)
            if not schedule:
                raise NotFoundError(resource_type="MaintenanceSchedule", resource_id=schedule_id)
            
            # Month arithmetic happens on the local wall clock
            now = timezone.localtime(self.clock.now()).replace(microsecond=0)
            self.schedule_repo.update(
                schedule,
                last_done_at=now,
                next_due_at=advance_due(now, schedule.cycle_months),
            )
            self.log_info(
                f"Maintenance schedule done: {schedule.title}",
                schedule_id=schedule.id,
                next_due_at=schedule.next_due_at,
            )
            # Reload so asset_group is available to serializers without an extra query
            return self.schedule_repo.get_by_id(schedule.id)
    
    def get_upcoming(self, days: Optional[int] = None) -> List[MaintenanceSchedule]:
        """
        Schedules due between now and now + days (inclusive).
        Skips are not considered here.
        """
        if days is None:
            days = getattr(settings, 'MAINTENANCE_UPCOMING_DEFAULT_DAYS', DefaultLimits.UPCOMING_WINDOW_DAYS)
        days = DateValidator.validate_days(days)
        
        window_start = self.clock.now()
        window_end = window_start + timedelta(days=days)
        return list(self.schedule_repo.find_upcoming(window_start, window_end))
