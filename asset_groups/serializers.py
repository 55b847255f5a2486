from rest_framework import serializers
from .models import AssetGroup


class AssetGroupSerializer(serializers.ModelSerializer):
    """Serializer for AssetGroup"""
    
    class Meta:
        model = AssetGroup
        fields = [
            'id', 'name', 'monthly_addon_fee', 'one_time_damage_fee',
            'free_replacement', 'updated_at'
        ]
        read_only_fields = ['id', 'updated_at']


class AssetGroupDropdownSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
