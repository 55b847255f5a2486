"""
Application-wide constants.
Centralized constants following DRY principle.
"""

# Schedule scope
class ScheduleScope:
    ASSET_GROUP = 0
    BUILDING = 1
    
    CHOICES = [
        (ASSET_GROUP, 'Asset'),
        (BUILDING, 'Building'),
    ]


# Notification display defaults
class NotificationDefaults:
    TITLE = 'Maintenance due soon'
    ACTION_URL = '/maintenance?scheduleId={schedule_id}'


# Default Limits
class DefaultLimits:
    UPCOMING_WINDOW_DAYS = 7
    MAX_CYCLE_MONTHS = 120
    MAX_NOTIFY_BEFORE_DAYS = 365
