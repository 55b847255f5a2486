"""
Time sources.
Services never call timezone.now() directly; they ask their clock so tests
and management commands can pin "now" to a fixed instant.
"""
from datetime import date, datetime, time
from typing import Optional

from django.utils import timezone


class SystemClock:
    """Wall clock in the project's time zone"""
    
    def now(self) -> datetime:
        return timezone.now()
    
    def today(self) -> date:
        return timezone.localdate(self.now())


class FixedClock(SystemClock):
    """Clock frozen at a given instant"""
    
    def __init__(self, at):
        if isinstance(at, datetime):
            self.at = at if timezone.is_aware(at) else timezone.make_aware(at)
        else:
            # A bare date means local midnight of that day
            self.at = timezone.make_aware(datetime.combine(at, time.min))
    
    def now(self) -> datetime:
        return self.at


def get_clock(clock: Optional[SystemClock] = None) -> SystemClock:
    return clock or SystemClock()
