from rest_framework import generics, status, permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView
from django.db import connection
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters
from drf_spectacular.utils import extend_schema, OpenApiExample
import logging

from .models import TenantUser
from .serializers import (
    UserSerializer, LoginSerializer, TenantSerializer,
    TenantUserSerializer, TenantUserCreateSerializer
)
from .permissions import IsTenantAdmin, HasTenantAccess, resolve_tenant_membership

logger = logging.getLogger(__name__)

# =============== AUTHENTICATION VIEWS ===============

class CustomTokenObtainPairView(TokenObtainPairView):
    """
    JWT authentication endpoint scoped to a tenant.

    The tenant comes from ``tenant_code`` in the body, the ``X-Tenant-Code``
    header, or the configured default tenant.
    """
    serializer_class = LoginSerializer

    @extend_schema(
        summary="User Login with JWT Token",
        request=LoginSerializer,
        responses={
            200: {
                'type': 'object',
                'properties': {
                    'refresh': {'type': 'string', 'description': 'JWT refresh token'},
                    'access': {'type': 'string', 'description': 'JWT access token'},
                    'user': {'type': 'object', 'description': 'User information'},
                    'tenant': {'type': 'object', 'description': 'Tenant information'},
                    'role': {'type': 'string', 'description': 'User role in the tenant'},
                }
            },
            400: {'description': 'Invalid credentials or not a member of the tenant'},
        },
        examples=[
            OpenApiExample(
                'Admin Login',
                value={
                    "email": "admin@mentra.dev",
                    "password": "SecurePassword123!",
                    "tenant_code": "demo"
                }
            )
        ]
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        tenant_user = serializer.validated_data['tenant_user']

        # Update last login
        user.last_login_at = timezone.now()
        user.save(update_fields=['last_login_at'])

        # Generate tokens
        refresh = RefreshToken.for_user(user)
        refresh['tenant_code'] = serializer.validated_data['tenant_code']
        refresh['role'] = tenant_user.role if tenant_user else TenantUser.ROLE_ADMIN

        logger.info(f"User {user.email} logged in to tenant {serializer.validated_data['tenant_code']}")

        return Response({
            'refresh': str(refresh),
            'access': str(refresh.access_token),
            'user': UserSerializer(user).data,
            'tenant': TenantSerializer(tenant_user.tenant).data if tenant_user else None,
            'role': refresh['role'],
        }, status=status.HTTP_200_OK)


class MyProfileView(generics.RetrieveUpdateAPIView):
    """
    Get and update current user's profile information.
    """
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(summary="Get My Profile")
    def get_object(self):
        return self.request.user

    def perform_update(self, serializer):
        # Don't allow changing email through this endpoint
        serializer.validated_data.pop('email', None)
        serializer.save()


@extend_schema(summary="My Tenant Role")
@api_view(['GET'])
@permission_classes([HasTenantAccess])
def my_tenant_role(request, tenant_code):
    """Return the caller's membership in the tenant"""
    return Response({
        'tenant': TenantSerializer(request.tenant).data,
        'role': request.tenant_user.role if request.tenant_user else TenantUser.ROLE_ADMIN,
    })

# =============== USER MANAGEMENT ===============

class TenantUserListCreateView(generics.ListCreateAPIView):
    """
    List and register team members of a tenant.
    Only tenant admins can manage members.
    """
    permission_classes = [IsTenantAdmin]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['role', 'is_active']
    search_fields = ['user__email', 'user__first_name', 'user__last_name']

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return TenantUserCreateSerializer
        return TenantUserSerializer

    @extend_schema(summary="List Tenant Users")
    def get_queryset(self):
        tenant, _ = resolve_tenant_membership(self.request, self)
        return TenantUser.objects.filter(tenant=tenant).select_related('user', 'tenant')

    @extend_schema(
        summary="Register Tenant User",
        request=TenantUserCreateSerializer,
        examples=[
            OpenApiExample(
                'Register Staff',
                value={
                    "role": "staff",
                    "user_email": "staff@mentra.dev",
                    "user_password": "SecurePassword123!",
                    "user_first_name": "Demo",
                    "user_last_name": "Staff"
                }
            )
        ]
    )
    def perform_create(self, serializer):
        serializer.save(tenant=self.request.tenant)


class TenantUserDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    Retrieve, modify or deactivate a tenant member.
    Only tenant admins can modify members.
    """
    serializer_class = TenantUserSerializer
    permission_classes = [IsTenantAdmin]
    lookup_field = 'id'
    lookup_url_kwarg = 'member_id'

    def get_queryset(self):
        tenant, _ = resolve_tenant_membership(self.request, self)
        return TenantUser.objects.filter(tenant=tenant).select_related('user', 'tenant')

    def perform_update(self, serializer):
        if serializer.instance.user == self.request.user and serializer.validated_data.get('role', TenantUser.ROLE_ADMIN) != TenantUser.ROLE_ADMIN:
            raise PermissionDenied('Admins cannot demote themselves')
        serializer.save()

    @extend_schema(summary="Deactivate Tenant User")
    def perform_destroy(self, instance):
        if instance.user == self.request.user:
            raise PermissionDenied('Admins cannot remove themselves')
        instance.is_active = False
        instance.save()

# =============== SYSTEM ===============

@extend_schema(summary="Health Check")
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health_check(request):
    try:
        # Test database connection
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")

        return Response({
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'database': 'connected',
        })
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return Response({
            'status': 'unhealthy',
            'timestamp': timezone.now().isoformat(),
            'database': 'disconnected',
            'error': str(e)
        }, status=status.HTTP_503_SERVICE_UNAVAILABLE)
