from rest_framework import serializers
from .models import Item, ItemCategory


class ItemSerializer(serializers.ModelSerializer):
    """Inventory item in the shop frontend's wire format."""

    _id = serializers.UUIDField(source='id', read_only=True)
    partType = serializers.CharField(source='part_type', max_length=100, required=False, allow_blank=True)
    imageUrl = serializers.URLField(source='image_url', max_length=500, required=False, allow_blank=True)
    isAvailableForRent = serializers.BooleanField(source='is_available_for_rent', required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Item
        fields = [
            '_id',
            'name',
            'category',
            'type',
            'brand',
            'price',
            'stock',
            'partType',
            'compatibility',
            'imageUrl',
            'isAvailableForRent',
            'createdAt',
            'updatedAt',
        ]


class ItemFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for inventory filtering.

    Query Parameters:
        category (str): 'Bicycle' or 'Part'
        brand (str): Exact brand
        type (str): Exact type
        isAvailableForRent (bool): Rental availability
    """

    category = serializers.ChoiceField(choices=ItemCategory.choices, required=False)
    brand = serializers.CharField(required=False)
    type = serializers.CharField(required=False)
    isAvailableForRent = serializers.BooleanField(source='is_available_for_rent', required=False)
