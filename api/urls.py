"""
API URLs for PropCare
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from asset_groups.views import AssetGroupViewSet
from maintenance.views import MaintenanceScheduleViewSet
from notifications.views import NotificationViewSet

# Create router
router = DefaultRouter()
router.register(r'asset-groups', AssetGroupViewSet, basename='asset-group')
router.register(r'schedules', MaintenanceScheduleViewSet, basename='schedule')
router.register(r'notifications', NotificationViewSet, basename='notification')

urlpatterns = [
    # JWT Authentication
    path('auth/login/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    
    # API routes
    path('', include(router.urls)),
]
