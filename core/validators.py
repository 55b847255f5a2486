"""
Validation utilities and validators.
Centralized validation logic following single responsibility principle.
"""
from datetime import date, datetime
from core.constants import DefaultLimits, ScheduleScope
from core.exceptions import ValidationError as AppValidationError


class ScheduleValidator:
    """Validates maintenance schedule input"""
    
    @staticmethod
    def validate_cycle_months(cycle_months):
        """Cycle length must be a non-negative whole number of months (or None)"""
        if cycle_months is None:
            return
        if isinstance(cycle_months, bool) or not isinstance(cycle_months, int):
            raise AppValidationError(
                message="Cycle length must be a whole number of months",
                code="INVALID_CYCLE_MONTHS",
                details={"cycle_months": cycle_months}
            )
        if cycle_months < 0:
            raise AppValidationError(
                message="Cycle length cannot be negative",
                code="INVALID_CYCLE_MONTHS",
                details={"cycle_months": cycle_months}
            )
        if cycle_months > DefaultLimits.MAX_CYCLE_MONTHS:
            raise AppValidationError(
                message=f"Cycle length cannot exceed {DefaultLimits.MAX_CYCLE_MONTHS} months",
                code="CYCLE_MONTHS_TOO_LARGE",
                details={"cycle_months": cycle_months, "max": DefaultLimits.MAX_CYCLE_MONTHS}
            )
    
    @staticmethod
    def validate_notify_before_days(days):
        """Lead time must be a non-negative number of days"""
        if days is None:
            return
        if days < 0:
            raise AppValidationError(
                message="Notify-before days cannot be negative",
                code="INVALID_NOTIFY_BEFORE_DAYS",
                details={"notify_before_days": days}
            )
        if days > DefaultLimits.MAX_NOTIFY_BEFORE_DAYS:
            raise AppValidationError(
                message=f"Notify-before days cannot exceed {DefaultLimits.MAX_NOTIFY_BEFORE_DAYS}",
                code="NOTIFY_BEFORE_DAYS_TOO_LARGE",
                details={"notify_before_days": days}
            )
    
    @staticmethod
    def validate_scope(scope, asset_group_id=None):
        """Scope must be known; asset-group scope needs an asset group"""
        valid = [value for value, _ in ScheduleScope.CHOICES]
        if scope not in valid:
            raise AppValidationError(
                message=f"Unknown schedule scope: {scope}",
                code="INVALID_SCOPE",
                details={"scope": scope, "allowed": valid}
            )
        if scope == ScheduleScope.ASSET_GROUP and asset_group_id is None:
            raise AppValidationError(
                message="Asset-group scoped schedules require an asset group",
                code="ASSET_GROUP_REQUIRED"
            )
        if scope == ScheduleScope.BUILDING and asset_group_id is not None:
            raise AppValidationError(
                message="Building-wide schedules cannot reference an asset group",
                code="ASSET_GROUP_NOT_ALLOWED",
                details={"asset_group_id": asset_group_id}
            )


class DateValidator:
    """Parses calendar dates at the API boundary"""
    
    @staticmethod
    def parse_date(value, field_name="date") -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(str(value), '%Y-%m-%d').date()
        except (TypeError, ValueError):
            raise AppValidationError(
                message=f"Invalid {field_name}: expected YYYY-MM-DD",
                code="INVALID_DATE",
                details={field_name: value}
            )
    
    @staticmethod
    def validate_days(days, field_name="days") -> int:
        try:
            days = int(days)
        except (TypeError, ValueError):
            raise AppValidationError(
                message=f"{field_name} must be an integer",
                code="INVALID_DAYS",
                details={field_name: days}
            )
        if days < 0:
            raise AppValidationError(
                message=f"{field_name} cannot be negative",
                code="INVALID_DAYS",
                details={field_name: days}
            )
        return days
