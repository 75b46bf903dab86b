from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    RentalSerializer,
    RentalCreateSerializer,
    RentalStatusSerializer,
)
from .services import (
    create_rental,
    list_rentals,
    update_rental_status,
    RentalNotFoundError,
)


@extend_schema(
    methods=['GET'],
    responses={200: RentalSerializer(many=True)},
    description="All rentals, newest first.",
    tags=['rentals'],
)
@extend_schema(
    methods=['POST'],
    request=RentalCreateSerializer,
    responses={201: RentalSerializer},
    description="Register a new bicycle rental.",
    tags=['rentals'],
)
@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def rentals(request):
    """List rentals or register a new one."""
    if request.method == 'GET':
        return Response(RentalSerializer(list_rentals(), many=True).data)

    serializer = RentalCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'message': 'All required rental fields must be completed.',
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    rental = create_rental(**serializer.validated_data)
    return Response({
        'message': 'Rental registered.',
        'rental': RentalSerializer(rental).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=RentalStatusSerializer,
    responses={200: RentalSerializer},
    description="Change the status of a rental.",
    tags=['rentals'],
)
@api_view(['PUT'])
@permission_classes([AllowAny])
def rental_status(request, pk):
    """Update the status of a rental."""
    serializer = RentalStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'message': 'Invalid rental status.',
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    try:
        rental = update_rental_status(rental_id=pk, status=serializer.validated_data['status'])
    except RentalNotFoundError:
        return Response(
            {'message': 'Rental not found.'},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response({
        'message': 'Rental status updated.',
        'rental': RentalSerializer(rental).data,
    })
