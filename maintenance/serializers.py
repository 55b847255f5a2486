from rest_framework import serializers
from core.constants import ScheduleScope, DefaultLimits
from core.dto import MaintenanceScheduleDTO
from .models import MaintenanceSchedule


class MaintenanceScheduleSerializer(serializers.ModelSerializer):
    """Read serializer for MaintenanceSchedule"""
    asset_group_id = serializers.IntegerField(read_only=True, allow_null=True)
    asset_group_name = serializers.CharField(read_only=True, allow_null=True)
    scope_display = serializers.CharField(source='get_scope_display', read_only=True)
    next_due_date = serializers.DateField(read_only=True, allow_null=True)
    notice_start_date = serializers.DateField(read_only=True, allow_null=True)
    is_recurring = serializers.BooleanField(read_only=True)
    
    class Meta:
        model = MaintenanceSchedule
        fields = [
            'id', 'scope', 'scope_display', 'asset_group_id', 'asset_group_name',
            'cycle_months', 'is_recurring', 'last_done_at', 'next_due_at',
            'next_due_date', 'notify_before_days', 'notice_start_date',
            'title', 'description', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class MaintenanceScheduleWriteSerializer(serializers.Serializer):
    """
    Input for create and full update.
    Every mutable field is replaced on update, so omitted optional fields become empty.
    """
    scope = serializers.ChoiceField(choices=ScheduleScope.CHOICES, default=ScheduleScope.BUILDING)
    asset_group_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    cycle_months = serializers.IntegerField(
        required=False, allow_null=True, default=None,
        min_value=0, max_value=DefaultLimits.MAX_CYCLE_MONTHS
    )
    notify_before_days = serializers.IntegerField(
        required=False, allow_null=True, default=0,
        min_value=0, max_value=DefaultLimits.MAX_NOTIFY_BEFORE_DAYS
    )
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    last_done_at = serializers.DateTimeField(required=False, allow_null=True, default=None)
    next_due_at = serializers.DateTimeField(required=False, allow_null=True, default=None)
    
    def to_dto(self) -> MaintenanceScheduleDTO:
        data = self.validated_data
        return MaintenanceScheduleDTO(
            scope=data['scope'],
            asset_group_id=data['asset_group_id'],
            cycle_months=data['cycle_months'],
            notify_before_days=data['notify_before_days'] or 0,
            title=data['title'],
            description=data['description'],
            last_done_at=data['last_done_at'],
            next_due_at=data['next_due_at'],
        )
