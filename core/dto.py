"""
Data Transfer Objects (DTOs).
Used for passing data between layers without exposing domain models.
"""
from dataclasses import dataclass, asdict
from typing import Optional
from datetime import date, datetime
from core.constants import ScheduleScope


@dataclass
class MaintenanceScheduleDTO:
    """Data Transfer Object for MaintenanceSchedule writes (create / full update)"""
    scope: int = ScheduleScope.BUILDING
    asset_group_id: Optional[int] = None
    cycle_months: Optional[int] = None
    notify_before_days: int = 0
    title: str = ""
    description: str = ""
    last_done_at: Optional[datetime] = None
    next_due_at: Optional[datetime] = None


@dataclass(frozen=True)
class Dormant:
    """Schedule with no pending occurrence"""
    cycle_months: Optional[int] = None


@dataclass(frozen=True)
class Scheduled:
    """Schedule with a pending occurrence"""
    next_due_at: datetime
    cycle_months: Optional[int] = None


@dataclass
class DueNotificationDTO:
    """One occurrence that should be surfaced to staff right now"""
    schedule_id: int
    schedule_title: str
    schedule_description: str
    asset_group_id: Optional[int]
    asset_group_name: Optional[str]
    next_due_date: date
    cycle_months: Optional[int]
    notify_days: int
    notify_at: datetime
    overdue: bool
    title: str
    message: str
    action_url: str
    
    def to_dict(self):
        return asdict(self)
