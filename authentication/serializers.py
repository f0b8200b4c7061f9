from rest_framework import serializers
from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from django.db import transaction
from .models import CustomUser, Tenant, TenantUser


class UserSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, validators=[validate_password], required=False)
    confirm_password = serializers.CharField(write_only=True, required=False)
    full_name = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = CustomUser
        fields = [
            'id', 'email', 'first_name', 'last_name', 'full_name',
            'password', 'confirm_password', 'is_active', 'last_login_at'
        ]
        extra_kwargs = {
            'password': {'write_only': True},
            'is_active': {'read_only': True},
            'last_login_at': {'read_only': True}
        }

    def get_full_name(self, obj):
        return f"{obj.first_name} {obj.last_name}".strip()

    def validate(self, attrs):
        if 'password' in attrs and 'confirm_password' in attrs:
            if attrs['password'] != attrs['confirm_password']:
                raise serializers.ValidationError("Passwords don't match")
        return attrs

    def update(self, instance, validated_data):
        validated_data.pop('confirm_password', None)
        password = validated_data.pop('password', None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)

        if password:
            instance.set_password(password)

        instance.save()
        return instance


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()
    tenant_code = serializers.CharField(required=False)

    def validate(self, attrs):
        email = attrs.get('email').strip()
        password = attrs.get('password')

        # Stored addresses keep the case of their local part
        account = CustomUser.objects.filter(email__iexact=email).only('email').first()
        user = authenticate(username=account.email if account else email, password=password)
        if not user:
            raise serializers.ValidationError('Invalid email or password')

        if not user.is_active:
            raise serializers.ValidationError('User account is disabled')

        request = self.context.get('request')
        tenant_code = attrs.get('tenant_code') or getattr(request, 'tenant_code', None)

        tenant_user = TenantUser.objects.select_related('tenant').filter(
            user=user,
            tenant__tenant_code=tenant_code,
            tenant__is_active=True,
            is_active=True
        ).first()
        if tenant_user is None and not user.is_super_admin:
            raise serializers.ValidationError('You are not a member of this tenant')

        attrs['user'] = user
        attrs['tenant_user'] = tenant_user
        attrs['tenant_code'] = tenant_code
        return attrs


class TenantSerializer(serializers.ModelSerializer):
    total_users = serializers.SerializerMethodField()

    class Meta:
        model = Tenant
        fields = ['id', 'name', 'tenant_code', 'is_active', 'total_users', 'created_at', 'updated_at']
        read_only_fields = ['id', 'tenant_code', 'created_at', 'updated_at']

    def get_total_users(self, obj):
        return obj.tenant_users.filter(is_active=True).count()


class TenantUserSerializer(serializers.ModelSerializer):
    user_info = UserSerializer(source='user', read_only=True)
    tenant_code = serializers.CharField(source='tenant.tenant_code', read_only=True)
    role_display = serializers.CharField(source='get_role_display', read_only=True)

    # Optional account changes when modifying a member
    user_first_name = serializers.CharField(write_only=True, max_length=150, required=False)
    user_last_name = serializers.CharField(write_only=True, max_length=150, required=False)
    user_password = serializers.CharField(write_only=True, validators=[validate_password], required=False)

    class Meta:
        model = TenantUser
        fields = [
            'id', 'role', 'role_display', 'is_active', 'assigned_at', 'created_at', 'updated_at',
            'user_info', 'tenant_code', 'user_first_name', 'user_last_name', 'user_password'
        ]
        read_only_fields = ['id', 'assigned_at', 'created_at', 'updated_at']

    @transaction.atomic
    def update(self, instance, validated_data):
        user = instance.user
        if 'user_first_name' in validated_data:
            user.first_name = validated_data.pop('user_first_name')
        if 'user_last_name' in validated_data:
            user.last_name = validated_data.pop('user_last_name')
        password = validated_data.pop('user_password', None)
        if password:
            user.set_password(password)
        user.save()
        return super().update(instance, validated_data)


class TenantUserCreateSerializer(serializers.ModelSerializer):
    # User creation fields
    user_email = serializers.EmailField(write_only=True)
    user_password = serializers.CharField(write_only=True, validators=[validate_password])
    user_first_name = serializers.CharField(write_only=True, max_length=150)
    user_last_name = serializers.CharField(write_only=True, max_length=150, required=False, allow_blank=True)

    # Additional fields for response
    user_info = UserSerializer(source='user', read_only=True)
    tenant_code = serializers.CharField(source='tenant.tenant_code', read_only=True)

    class Meta:
        model = TenantUser
        fields = [
            'id', 'role', 'is_active',
            'user_email', 'user_password', 'user_first_name', 'user_last_name',
            'user_info', 'tenant_code', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'is_active', 'created_at', 'updated_at']

    def validate_user_email(self, value):
        value = value.strip().lower()
        if CustomUser.objects.filter(email=value).exists():
            raise serializers.ValidationError('User with this email already exists')
        return value

    @transaction.atomic
    def create(self, validated_data):
        # Extract user data
        user = CustomUser(
            email=validated_data.pop('user_email'),
            first_name=validated_data.pop('user_first_name'),
            last_name=validated_data.pop('user_last_name', ''),
        )
        user.set_password(validated_data.pop('user_password'))
        user.save()

        # Create tenant user
        return TenantUser.objects.create(
            user=user,
            assigned_by=self.context['request'].user,
            **validated_data
        )
