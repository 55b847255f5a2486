from django.contrib import admin
from .models import AssetGroup


@admin.register(AssetGroup)
class AssetGroupAdmin(admin.ModelAdmin):
    list_display = ['name', 'monthly_addon_fee', 'one_time_damage_fee', 'free_replacement', 'updated_at']
    list_filter = ['free_replacement']
    search_fields = ['name']
    readonly_fields = ['updated_at']
