from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import Item
from .serializers import ItemSerializer, ItemFilterSerializer
from .services import search_items, get_rentable_bikes


class ItemViewSet(viewsets.ModelViewSet):
    """
    ViewSet for inventory management.

    list: All items, optionally filtered by exact field values
    create: Add a new item
    retrieve: Get a specific item
    update: Update an item (PUT behaves as a partial update)
    destroy: Delete an item
    """

    queryset = Item.objects.all()
    serializer_class = ItemSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        """Filter items using input serializer validation."""
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = ItemFilterSerializer(data=self.request.query_params.dict())
        filter_serializer.is_valid(raise_exception=True)
        return search_items(**filter_serializer.validated_data)

    @extend_schema(parameters=[
        OpenApiParameter('category', str),
        OpenApiParameter('brand', str),
        OpenApiParameter('type', str),
        OpenApiParameter('isAvailableForRent', bool),
    ])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        """Add a new item to the inventory."""
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'message': 'Could not add item.',
                'errors': serializer.errors,
            }, status=status.HTTP_400_BAD_REQUEST)

        item = serializer.save()
        return Response({
            'message': 'Item added.',
            'item': ItemSerializer(item).data,
        }, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update an item with whatever fields are supplied."""
        item = self.get_object()
        serializer = self.get_serializer(item, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response({
                'message': 'Could not update item.',
                'errors': serializer.errors,
            }, status=status.HTTP_400_BAD_REQUEST)

        item = serializer.save()
        return Response({
            'message': 'Item updated.',
            'item': ItemSerializer(item).data,
        })

    def destroy(self, request, *args, **kwargs):
        """Delete an item and echo it back."""
        item = self.get_object()
        data = ItemSerializer(item).data
        item.delete()
        return Response({
            'message': 'Item deleted.',
            'item': data,
        })


@extend_schema(
    responses={200: ItemSerializer(many=True)},
    description="Bicycles that are available for rent.",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def available_bikes(request):
    """List bicycles available for rent."""
    bikes = get_rentable_bikes()
    return Response(ItemSerializer(bikes, many=True).data)
