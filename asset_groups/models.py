from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models


class AssetGroup(models.Model):
    """Category of room assets (beds, air conditioners, water heaters...)"""
    name = models.CharField(max_length=100, unique=True)
    monthly_addon_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Monthly fee when the asset is an add-on (e.g. extra bed)"
    )
    one_time_damage_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="One-off charge when the asset is damaged"
    )
    free_replacement = models.BooleanField(
        default=True,
        help_text="Replaced free of charge (e.g. light bulbs)"
    )
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        ordering = ['name']
        verbose_name = "Asset Group"
        verbose_name_plural = "Asset Groups"
    
    def __str__(self):
        return self.name
