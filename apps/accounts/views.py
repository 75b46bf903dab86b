import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    authenticate_employee,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
    EmployeeAccessDeniedError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class LoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


def _invalid_request(serializer):
    return Response({
        'message': 'Please complete all required fields.',
        'errors': serializer.errors,
    }, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: MessageResponseSerializer,
        400: MessageResponseSerializer,
        409: MessageResponseSerializer,
    },
    description="Register a new customer account.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new customer account."""
    serializer = UserRegistrationSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid_request(serializer)

    try:
        register_user(**serializer.validated_data)
    except EmailAlreadyRegisteredError:
        return Response(
            {'message': 'This email is already registered.'},
            status=status.HTTP_409_CONFLICT
        )

    return Response({
        'message': 'Registration successful. You can now log in.',
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: MessageResponseSerializer,
        403: MessageResponseSerializer,
    },
    description="Authenticate with email and password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid_request(serializer)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError:
        return Response({
            'message': 'Invalid credentials.'
        }, status=status.HTTP_400_BAD_REQUEST)
    except InactiveAccountError:
        return Response({
            'message': 'Account is deactivated.'
        }, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
    })


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: MessageResponseSerializer,
        403: MessageResponseSerializer,
    },
    description="Authenticate an employee or administrator.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def employee_login(request):
    """Login restricted to employees and administrators."""
    serializer = UserLoginSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid_request(serializer)

    try:
        user = authenticate_employee(**serializer.validated_data)
    except InvalidCredentialsError:
        return Response({
            'message': 'Invalid credentials.'
        }, status=status.HTTP_400_BAD_REQUEST)
    except (EmployeeAccessDeniedError, InactiveAccountError) as e:
        logger.warning("Employee login refused for %s: %s", serializer.validated_data['email'], e)
        return Response({
            'message': str(e)
        }, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Employee login successful',
        'user': UserSerializer(user).data,
    })
