from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Public user profile returned by the login endpoints."""

    _id = serializers.UUIDField(source='id', read_only=True)
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    isAdmin = serializers.BooleanField(source='is_admin', read_only=True)
    isEmployee = serializers.BooleanField(source='is_employee', read_only=True)

    class Meta:
        model = User
        fields = ['_id', 'firstName', 'lastName', 'email', 'isAdmin', 'isEmployee']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Validate registration payload."""

    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user and employee login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
