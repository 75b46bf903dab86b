import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    PurchaseRequestSerializer,
    DispatchRecordSerializer,
    DispatchStatusSerializer,
)
from .services import (
    process_purchase,
    list_dispatch_records,
    update_dispatch_status,
    PurchaseValidationError,
    ItemNotFoundError,
    InsufficientStockError,
    StoreError,
    DispatchRecordNotFoundError,
)

logger = logging.getLogger(__name__)


@extend_schema(
    request=PurchaseRequestSerializer,
    responses={200: DispatchRecordSerializer},
    description=(
        "Process a purchase: deduct stock for every cart line and create a "
        "Pending dispatch record, all or nothing. "
        "400 on invalid input, 422 for an unknown item, 409 for insufficient "
        "stock, 503 when the store is temporarily unavailable."
    ),
    tags=['purchases'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def purchase(request):
    """Process a checkout."""
    serializer = PurchaseRequestSerializer(data=request.data)
    if not serializer.is_valid():
        message = 'Please complete all contact and delivery details.'
        if 'cartItems' in serializer.errors:
            message = 'The cart is empty or contains invalid items.'
        return Response({
            'message': message,
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    try:
        record = process_purchase(purchase=serializer.to_purchase_request())
    except PurchaseValidationError as e:
        return Response(
            {'message': e.message, 'code': e.code},
            status=status.HTTP_400_BAD_REQUEST
        )
    except ItemNotFoundError as e:
        return Response({
            'message': e.message,
            'code': e.code,
            'itemId': str(e.item_id),
        }, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
    except InsufficientStockError as e:
        return Response({
            'message': e.message,
            'code': e.code,
            'itemId': str(e.item_id),
            'itemName': e.item_name,
            'available': e.available,
            'requested': e.requested,
        }, status=status.HTTP_409_CONFLICT)
    except StoreError as e:
        return Response({
            'message': e.message,
            'code': e.code,
            'retryable': e.retryable,
        }, status=(
            status.HTTP_503_SERVICE_UNAVAILABLE if e.retryable
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        ))

    return Response({
        'message': 'Purchase processed and stock updated. Dispatch record created.',
        'dispatchRecord': DispatchRecordSerializer(record).data,
    })


@extend_schema(
    responses={200: DispatchRecordSerializer(many=True)},
    description="All dispatch records, newest first.",
    tags=['purchases'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def dispatch_records(request):
    return Response(DispatchRecordSerializer(list_dispatch_records(), many=True).data)


@extend_schema(
    request=DispatchStatusSerializer,
    responses={200: DispatchRecordSerializer},
    description="Move a dispatch record to another status.",
    tags=['purchases'],
)
@api_view(['PUT'])
@permission_classes([AllowAny])
def dispatch_record_status(request, pk):
    """Update the status of a dispatch record."""
    serializer = DispatchStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'message': 'Invalid dispatch status.',
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    try:
        record = update_dispatch_status(record_id=pk, status=serializer.validated_data['status'])
    except DispatchRecordNotFoundError:
        logger.warning("Status update for unknown dispatch record %s", pk)
        return Response(
            {'message': 'Dispatch record not found.'},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response({
        'message': 'Dispatch status updated.',
        'record': DispatchRecordSerializer(record).data,
    })
