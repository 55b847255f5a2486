from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import MethodNotAllowed
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from .models import MaintenanceSchedule
from .serializers import MaintenanceScheduleSerializer, MaintenanceScheduleWriteSerializer
from .services import MaintenanceScheduleService
from asset_groups.services import AssetGroupService
from api.permissions import IsPropertyStaff


class MaintenanceScheduleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for maintenance schedules
    
    Writes go through MaintenanceScheduleService, which runs each change in
    its own transaction. PUT replaces every mutable field; PATCH on the
    detail route is not supported (use PUT, or the done action).
    """
    permission_classes = [IsAuthenticated, IsPropertyStaff]
    serializer_class = MaintenanceScheduleSerializer
    queryset = MaintenanceSchedule.objects.select_related('asset_group')
    lookup_value_regex = r'\d+'
    
    def get_service(self):
        return MaintenanceScheduleService()
    
    def _with_dropdown(self, schedules):
        """List payload shape shared by list and upcoming"""
        return {
            'result': MaintenanceScheduleSerializer(schedules, many=True).data,
            'asset_group_dropdown': AssetGroupService().get_dropdown(),
        }
    
    def list(self, request, *args, **kwargs):
        """All schedules plus the asset group dropdown"""
        return Response(self._with_dropdown(self.get_service().get_all_schedules()))
    
    def retrieve(self, request, pk=None, *args, **kwargs):
        schedule = self.get_service().get_schedule(pk)
        return Response(MaintenanceScheduleSerializer(schedule).data)
    
    def create(self, request, *args, **kwargs):
        serializer = MaintenanceScheduleWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        schedule = self.get_service().create_schedule(serializer.to_dto())
        return Response(MaintenanceScheduleSerializer(schedule).data, status=status.HTTP_201_CREATED)
    
    def update(self, request, pk=None, *args, **kwargs):
        serializer = MaintenanceScheduleWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        schedule = self.get_service().update_schedule(pk, serializer.to_dto())
        return Response(MaintenanceScheduleSerializer(schedule).data)
    
    def partial_update(self, request, *args, **kwargs):
        raise MethodNotAllowed(request.method)
    
    def destroy(self, request, pk=None, *args, **kwargs):
        self.get_service().delete_schedule(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
    
    @action(detail=True, methods=['patch', 'post'])
    def done(self, request, pk=None):
        """Mark the pending occurrence as completed"""
        schedule = self.get_service().mark_done(pk)
        return Response(MaintenanceScheduleSerializer(schedule).data)
    
    @action(detail=False, methods=['get'])
    def upcoming(self, request):
        """Schedules due within ?days=N (default from settings)"""
        days = request.query_params.get('days')
        return Response(self._with_dropdown(self.get_service().get_upcoming(days)))
