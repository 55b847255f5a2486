from datetime import timedelta
from django.db import models
from django.utils import timezone
from asset_groups.models import AssetGroup
from core.constants import ScheduleScope
from core.dto import Dormant, Scheduled


class MaintenanceSchedule(models.Model):
    """
    Recurring (or one-off) maintenance obligation.
    
    next_due_at is only advanced by mark-done or a full edit; skips never touch it.
    A null cycle_months (or 0) means the schedule goes dormant once completed.
    """
    scope = models.PositiveSmallIntegerField(choices=ScheduleScope.CHOICES, default=ScheduleScope.BUILDING)
    asset_group = models.ForeignKey(
        AssetGroup, on_delete=models.SET_NULL, related_name='maintenance_schedules',
        null=True, blank=True
    )
    cycle_months = models.PositiveIntegerField(
        null=True, blank=True,
        help_text="Recurrence interval in months. Empty or 0 means non-recurring"
    )
    last_done_at = models.DateTimeField(null=True, blank=True)
    next_due_at = models.DateTimeField(null=True, blank=True)
    notify_before_days = models.PositiveIntegerField(
        default=0,
        help_text="Start notifying this many days before the due date"
    )
    title = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'maintenance_schedule'
        ordering = ['id']
        verbose_name = "Maintenance Schedule"
        verbose_name_plural = "Maintenance Schedules"
        indexes = [
            models.Index(fields=['next_due_at'], name='ms_next_due_idx'),
        ]
    
    def __str__(self):
        return f"{self.title or 'Maintenance'} ({self.get_scope_display()})"
    
    @property
    def is_recurring(self):
        return bool(self.cycle_months) and self.cycle_months > 0
    
    @property
    def state(self):
        """Dormant or Scheduled, derived from next_due_at"""
        if self.next_due_at is None:
            return Dormant(cycle_months=self.cycle_months)
        return Scheduled(next_due_at=self.next_due_at, cycle_months=self.cycle_months)
    
    @property
    def next_due_date(self):
        """Local calendar date of the pending occurrence"""
        if self.next_due_at is None:
            return None
        return timezone.localdate(self.next_due_at)
    
    @property
    def notice_start_date(self):
        """First day the pending occurrence is surfaced"""
        due = self.next_due_date
        if due is None:
            return None
        return due - timedelta(days=max(0, self.notify_before_days or 0))
    
    @property
    def asset_group_name(self):
        return self.asset_group.name if self.asset_group_id else None


class MaintenanceNotificationSkip(models.Model):
    """A user dismissed the occurrence of `schedule` due on `due_date`"""
    schedule = models.ForeignKey(MaintenanceSchedule, on_delete=models.CASCADE, related_name='skips')
    due_date = models.DateField()
    skipped_at = models.DateTimeField(default=timezone.now)
    
    class Meta:
        db_table = 'maintenance_notification_skip'
        ordering = ['-skipped_at']
        verbose_name = "Notification Skip"
        verbose_name_plural = "Notification Skips"
        constraints = [
            models.UniqueConstraint(fields=['schedule', 'due_date'], name='ux_mns_schedule_due'),
        ]
    
    def __str__(self):
        return f"Skip {self.schedule_id} @ {self.due_date}"
