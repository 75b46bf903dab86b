from rest_framework import serializers
from .models import Repair, RepairStatus


class RepairSerializer(serializers.ModelSerializer):
    """Repair order in the shop frontend's wire format."""

    _id = serializers.UUIDField(source='id', read_only=True)
    bikeType = serializers.CharField(source='bike_type', read_only=True)
    bikeBrand = serializers.CharField(source='bike_brand', read_only=True)
    problemDescription = serializers.CharField(source='problem_description', read_only=True)
    customerName = serializers.CharField(source='customer_name', read_only=True)
    customerEmail = serializers.EmailField(source='customer_email', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Repair
        fields = [
            '_id',
            'bikeType',
            'bikeBrand',
            'problemDescription',
            'customerName',
            'customerEmail',
            'status',
            'createdAt',
        ]
        read_only_fields = fields


class RepairCreateSerializer(serializers.Serializer):
    bikeType = serializers.CharField(source='bike_type', max_length=100)
    bikeBrand = serializers.CharField(source='bike_brand', max_length=100, required=False, allow_blank=True)
    problemDescription = serializers.CharField(source='problem_description')
    customerName = serializers.CharField(source='customer_name', max_length=200)
    customerEmail = serializers.EmailField(source='customer_email')


class RepairStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RepairStatus.choices)
