import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    RepairSerializer,
    RepairCreateSerializer,
    RepairStatusSerializer,
)
from .services import (
    create_repair,
    list_repairs,
    update_repair_status,
    RepairNotFoundError,
)

logger = logging.getLogger(__name__)


@extend_schema(
    methods=['GET'],
    responses={200: RepairSerializer(many=True)},
    description="All repair orders, newest first.",
    tags=['repairs'],
)
@extend_schema(
    methods=['POST'],
    request=RepairCreateSerializer,
    responses={201: RepairSerializer},
    description="Open a repair order. New orders start as Pending.",
    tags=['repairs'],
)
@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def repairs(request):
    if request.method == 'GET':
        return Response(RepairSerializer(list_repairs(), many=True).data)

    serializer = RepairCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'message': 'All required repair fields must be completed.',
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    repair = create_repair(**serializer.validated_data)
    return Response({
        'message': 'Repair order registered.',
        'repair': RepairSerializer(repair).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=RepairStatusSerializer,
    responses={200: RepairSerializer},
    description="Move a repair order to another status.",
    tags=['repairs'],
)
@api_view(['PUT'])
@permission_classes([AllowAny])
def repair_status(request, pk):
    """Update the status of a repair order."""
    serializer = RepairStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'message': 'Invalid repair status.',
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    try:
        repair = update_repair_status(repair_id=pk, status=serializer.validated_data['status'])
    except RepairNotFoundError:
        logger.warning("Status update for unknown repair %s", pk)
        return Response(
            {'message': 'Repair order not found.'},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response({
        'message': 'Repair status updated.',
        'repair': RepairSerializer(repair).data,
    })
