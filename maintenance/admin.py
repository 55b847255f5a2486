from django.contrib import admin, messages
from .models import MaintenanceSchedule, MaintenanceNotificationSkip
from .services import MaintenanceScheduleService


class NotificationSkipInline(admin.TabularInline):
    model = MaintenanceNotificationSkip
    extra = 0
    readonly_fields = ['due_date', 'skipped_at']
    can_delete = False


@admin.register(MaintenanceSchedule)
class MaintenanceScheduleAdmin(admin.ModelAdmin):
    list_display = ['title', 'scope', 'asset_group', 'cycle_months', 'notify_before_days', 'last_done_at', 'next_due_at']
    list_filter = ['scope', 'asset_group']
    search_fields = ['title', 'description', 'asset_group__name']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'next_due_at'
    inlines = [NotificationSkipInline]
    actions = ['mark_done']
    
    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'description', 'scope', 'asset_group')
        }),
        ('Schedule', {
            'fields': ('cycle_months', 'notify_before_days', 'last_done_at', 'next_due_at')
        }),
        ('Dates', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    
    @admin.action(description="Mark selected schedules as done")
    def mark_done(self, request, queryset):
        service = MaintenanceScheduleService()
        for schedule in queryset:
            service.mark_done(schedule.id)
        self.message_user(request, f"{queryset.count()} schedule(s) marked as done", messages.SUCCESS)


@admin.register(MaintenanceNotificationSkip)
class MaintenanceNotificationSkipAdmin(admin.ModelAdmin):
    list_display = ['schedule', 'due_date', 'skipped_at']
    list_filter = ['due_date']
    search_fields = ['schedule__title']
    readonly_fields = ['schedule', 'due_date', 'skipped_at']
