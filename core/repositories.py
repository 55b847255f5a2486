"""
Repository pattern implementation.
Abstracts data access and provides a clean interface for domain services.
"""
from typing import Generic, TypeVar, Optional
from django.db.models import QuerySet, Model
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.
    Follows Repository pattern for data access abstraction.
    """
    
    def __init__(self, model: type[T]):
        self.model = model
    
    def get_by_id(self, id: int, **filters) -> Optional[T]:
        """Get a single instance by ID"""
        return self.get_queryset().filter(id=id, **filters).first()
    
    def get_for_update(self, id: int) -> Optional[T]:
        """Get a single instance by ID with a row lock (call inside a transaction)"""
        return self.model.objects.select_for_update().filter(id=id).first()
    
    def get_all(self, **filters) -> QuerySet[T]:
        """Get all instances matching filters"""
        return self.get_queryset().filter(**filters)
    
    def create(self, **kwargs) -> T:
        """Create a new instance"""
        return self.model.objects.create(**kwargs)
    
    def update(self, instance: T, **kwargs) -> T:
        """Update an existing instance"""
        for key, value in kwargs.items():
            setattr(instance, key, value)
        instance.save()
        return instance
    
    def delete(self, instance: T) -> bool:
        """Delete an instance"""
        instance.delete()
        logger.debug(f"Deleted {self.model.__name__}")
        return True
    
    def exists(self, **filters) -> bool:
        """Check if instance exists"""
        return self.model.objects.filter(**filters).exists()
    
    def get_queryset(self) -> QuerySet[T]:
        """Get base queryset for custom queries"""
        return self.model.objects.all()
