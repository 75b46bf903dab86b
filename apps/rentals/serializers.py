from decimal import Decimal
from rest_framework import serializers
from apps.inventory.models import Item
from .models import Rental, RentalStatus


class RentalSerializer(serializers.ModelSerializer):
    """Rental in the shop frontend's wire format."""

    _id = serializers.UUIDField(source='id', read_only=True)
    bikeId = serializers.UUIDField(source='bike_id', read_only=True)
    bikeName = serializers.CharField(source='bike_name', read_only=True)
    customerName = serializers.CharField(source='customer_name', read_only=True)
    customerEmail = serializers.EmailField(source='customer_email', read_only=True)
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    endDate = serializers.DateTimeField(source='end_date', read_only=True)
    totalPrice = serializers.DecimalField(source='total_price', max_digits=10, decimal_places=2, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Rental
        fields = [
            '_id',
            'bikeId',
            'bikeName',
            'customerName',
            'customerEmail',
            'startDate',
            'endDate',
            'totalPrice',
            'status',
            'createdAt',
        ]
        read_only_fields = fields


class RentalCreateSerializer(serializers.Serializer):
    """Validate a new rental request."""

    bikeId = serializers.PrimaryKeyRelatedField(source='bike', queryset=Item.objects.all())
    bikeName = serializers.CharField(source='bike_name', max_length=200)
    customerName = serializers.CharField(source='customer_name', max_length=200)
    customerEmail = serializers.EmailField(source='customer_email')
    startDate = serializers.DateTimeField(source='start_date')
    endDate = serializers.DateTimeField(source='end_date')
    totalPrice = serializers.DecimalField(
        source='total_price',
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01')
    )

    def validate(self, attrs):
        """Validate date range."""
        if attrs['end_date'] < attrs['start_date']:
            raise serializers.ValidationError({
                'endDate': 'End date must be after start date'
            })
        return attrs


class RentalStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RentalStatus.choices)
