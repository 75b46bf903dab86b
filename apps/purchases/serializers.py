from decimal import Decimal
from rest_framework import ISO_8601, serializers
from .models import DispatchRecord, DispatchLine, DispatchStatus
from .services import PurchaseRequest


# =============================================================================
# Input Serializers
# =============================================================================

class CartLineSerializer(serializers.Serializer):
    """
    Validate one cart line.

    The item may be referenced as ``itemId`` or, as carts built straight
    from inventory listings do, as ``_id``.
    """

    itemId = serializers.UUIDField(required=False)
    _id = serializers.UUIDField(required=False)
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00')
    )

    def validate(self, attrs):
        item_id = attrs.get('itemId') or attrs.get('_id')
        if item_id is None:
            raise serializers.ValidationError({
                'itemId': 'Each cart item must reference an inventory item'
            })
        return {
            'item_id': item_id,
            'quantity': attrs['quantity'],
            'unit_price': attrs['price'],
        }


class PurchaseRequestSerializer(serializers.Serializer):
    """
    Validate a checkout submission.

    Fields:
        cartItems (list): Non-empty list of cart lines
        deliveryDate (date): Suggested delivery date
        customerName (str): Customer's name
        customerEmail (str): Customer's email
        customerAddress (str): Optional delivery address
    """

    cartItems = CartLineSerializer(
        source='cart_items',
        many=True,
        allow_empty=False
    )
    # Browsers post either a plain date or a full ISO timestamp
    deliveryDate = serializers.DateField(
        source='delivery_date',
        input_formats=[
            ISO_8601,
            '%Y-%m-%dT%H:%M:%S.%fZ',
            '%Y-%m-%dT%H:%M:%SZ',
            '%Y-%m-%dT%H:%M:%S.%f%z',
            '%Y-%m-%dT%H:%M:%S%z',
        ]
    )
    customerName = serializers.CharField(source='customer_name', max_length=200)
    customerEmail = serializers.EmailField(source='customer_email')
    customerAddress = serializers.CharField(
        source='customer_address',
        max_length=500,
        required=False,
        allow_blank=True
    )

    def to_purchase_request(self):
        """Build the typed request from validated data."""
        return PurchaseRequest.from_cart(**self.validated_data)


class DispatchStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=DispatchStatus.choices)


# =============================================================================
# Output Serializers
# =============================================================================

class DispatchLineSerializer(serializers.ModelSerializer):
    itemId = serializers.UUIDField(source='item_id', read_only=True)
    priceAtPurchase = serializers.DecimalField(
        source='price_at_purchase',
        max_digits=10,
        decimal_places=2,
        read_only=True
    )

    class Meta:
        model = DispatchLine
        fields = ['itemId', 'name', 'quantity', 'priceAtPurchase']
        read_only_fields = fields


class CustomerDetailsSerializer(serializers.Serializer):
    name = serializers.CharField(source='customer_name', read_only=True)
    email = serializers.EmailField(source='customer_email', read_only=True)
    address = serializers.CharField(source='customer_address', read_only=True)


class DispatchRecordSerializer(serializers.ModelSerializer):
    """Dispatch record with its line snapshots."""

    items = DispatchLineSerializer(source='lines', many=True, read_only=True)
    totalAmount = serializers.DecimalField(
        source='total_amount',
        max_digits=12,
        decimal_places=2,
        read_only=True
    )
    deliveryDate = serializers.DateField(source='delivery_date', read_only=True)
    customerDetails = CustomerDetailsSerializer(source='*', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = DispatchRecord
        fields = [
            'id',
            'items',
            'totalAmount',
            'deliveryDate',
            'customerDetails',
            'status',
            'createdAt',
        ]
        read_only_fields = fields
