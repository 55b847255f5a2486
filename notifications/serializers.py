from rest_framework import serializers


class DueNotificationSerializer(serializers.Serializer):
    """Serializer for DueNotificationDTO"""
    schedule_id = serializers.IntegerField()
    schedule_title = serializers.CharField()
    schedule_description = serializers.CharField()
    asset_group_id = serializers.IntegerField(allow_null=True)
    asset_group_name = serializers.CharField(allow_null=True)
    next_due_date = serializers.DateField()
    cycle_months = serializers.IntegerField(allow_null=True)
    notify_days = serializers.IntegerField()
    notify_at = serializers.DateTimeField()
    overdue = serializers.BooleanField()
    title = serializers.CharField()
    message = serializers.CharField()
    action_url = serializers.CharField()
