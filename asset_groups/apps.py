from django.apps import AppConfig


class AssetGroupsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'asset_groups'
    verbose_name = 'Asset groups'
