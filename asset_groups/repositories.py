"""
Asset group repository - Data access layer for AssetGroup domain.
"""
from typing import List, Dict, Any
from core.repositories import BaseRepository
from .models import AssetGroup


class AssetGroupRepository(BaseRepository[AssetGroup]):
    """Repository for AssetGroup model"""
    
    def __init__(self):
        super().__init__(AssetGroup)
    
    def dropdown(self) -> List[Dict[str, Any]]:
        """Id/name pairs for select boxes"""
        return list(self.get_queryset().order_by('name').values('id', 'name'))
