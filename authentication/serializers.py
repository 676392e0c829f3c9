from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    created_at = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'role', 'full_name', 'is_active',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class CashierSerializer(serializers.ModelSerializer):
    """Only the display name; embedded in transaction read-backs"""

    class Meta:
        model = User
        fields = ['full_name']


class UserCreateSerializer(serializers.ModelSerializer):
    username = serializers.CharField(min_length=3, max_length=150)
    password = serializers.CharField(write_only=True, min_length=6, validators=[validate_password])
    full_name = serializers.CharField(min_length=2, max_length=255)
    role = serializers.ChoiceField(choices=User.Role.choices)

    class Meta:
        model = User
        fields = ['id', 'username', 'password', 'role', 'full_name']

    def validate_username(self, value):
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)

    def to_representation(self, instance):
        return UserSerializer(instance).data


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        username = attrs.get('username')
        password = attrs.get('password')

        user = User.objects.filter(username=username).first()
        if user is None or not user.check_password(password):
            raise serializers.ValidationError('Invalid username or password')

        if not user.is_active:
            raise serializers.ValidationError('User account is inactive')

        attrs['user'] = user
        return attrs


class LoginResponseSerializer(serializers.Serializer):
    """Shape of a successful login, for the API schema"""
    refresh = serializers.CharField()
    access = serializers.CharField()
    user = UserSerializer()
