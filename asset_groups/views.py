from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from .models import AssetGroup
from .serializers import AssetGroupSerializer, AssetGroupDropdownSerializer
from .services import AssetGroupService


class AssetGroupViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only asset group listing.
    Asset groups are maintained through the Django admin.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = AssetGroupSerializer
    queryset = AssetGroup.objects.all()
    search_fields = ['name']
    ordering_fields = ['name', 'updated_at']
    ordering = ['name']
    
    @action(detail=False, methods=['get'])
    def dropdown(self, request):
        """Id/name pairs for the schedule form"""
        serializer = AssetGroupDropdownSerializer(AssetGroupService().get_dropdown(), many=True)
        return Response(serializer.data)
