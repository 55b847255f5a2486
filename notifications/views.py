from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from api.permissions import IsPropertyStaff
from core.validators import DateValidator
from .serializers import DueNotificationSerializer
from .services import NotificationService


class NotificationViewSet(viewsets.ViewSet):
    """
    Maintenance notifications.
    
    - due: occurrences inside their notice window that were not dismissed
    - skip: dismiss one occurrence (schedule + due date) without completing it
    """
    permission_classes = [IsAuthenticated, IsPropertyStaff]
    
    @action(detail=False, methods=['get'])
    def due(self, request):
        """Get all due notifications"""
        notifications = NotificationService().get_due_notifications()
        return Response(DueNotificationSerializer(notifications, many=True).data)
    
    @action(
        detail=False, methods=['delete', 'post'],
        url_path=r'schedule/(?P<schedule_id>\d+)/due/(?P<due_date>[^/]+)/skip'
    )
    def skip(self, request, schedule_id=None, due_date=None):
        """Dismiss the occurrence of schedule_id due on due_date (YYYY-MM-DD)"""
        parsed = DateValidator.parse_date(due_date, 'due_date')
        NotificationService().skip(int(schedule_id), parsed)
        return Response(status=status.HTTP_204_NO_CONTENT)
