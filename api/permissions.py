"""
Permissions for the property staff API
"""
from rest_framework import permissions


class IsPropertyStaff(permissions.BasePermission):
    """
    Authenticated users may read; only staff users may change data.
    """
    
    def has_permission(self, request, view):
        """Check if user is authenticated and, for writes, staff"""
        if not (request.user and request.user.is_authenticated):
            return False
        
        if request.method in permissions.SAFE_METHODS:
            return True
        
        return request.user.is_staff
