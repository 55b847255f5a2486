"""
Asset group service - lookups used by other domains.
"""
from typing import Optional
from core.services import BaseService
from core.exceptions import NotFoundError
from .repositories import AssetGroupRepository
from .models import AssetGroup


class AssetGroupService(BaseService):
    """Service for asset group lookups"""
    
    def __init__(self, clock=None):
        super().__init__(clock)
        self.asset_group_repo = AssetGroupRepository()
    
    def resolve(self, asset_group_id: Optional[int]) -> Optional[AssetGroup]:
        """
        Resolve an asset group id to an instance.
        
        Returns None for a None id.
        
        Raises:
            NotFoundError: If the id doesn't exist
        """
        if asset_group_id is None:
            return None
        asset_group = self.asset_group_repo.get_by_id(asset_group_id)
        if not asset_group:
            raise NotFoundError(resource_type="AssetGroup", resource_id=asset_group_id)
        return asset_group
    
    def get_dropdown(self):
        return self.asset_group_repo.dropdown()
