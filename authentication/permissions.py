from rest_framework import permissions
from rest_framework.exceptions import NotFound
from .models import Tenant, TenantUser


def resolve_tenant_membership(request, view):
    """
    Resolve the tenant named in the URL and the caller's membership in it.

    Caches ``request.tenant`` and ``request.tenant_user`` for later use.
    Super admins get access to every active tenant without a membership row.
    """
    if hasattr(request, 'tenant_user'):
        return request.tenant, request.tenant_user

    tenant_code = view.kwargs.get('tenant_code') or getattr(request, 'tenant_code', None)
    if not tenant_code:
        return None, None

    try:
        tenant = Tenant.objects.get(tenant_code=tenant_code, is_active=True)
    except Tenant.DoesNotExist:
        raise NotFound('Tenant not found')

    tenant_user = TenantUser.objects.filter(
        tenant=tenant,
        user=request.user,
        is_active=True
    ).first()

    request.tenant = tenant
    request.tenant_user = tenant_user
    return tenant, tenant_user


class HasTenantAccess(permissions.BasePermission):
    """
    Permission to check if user is an active member of the tenant in the URL
    """
    message = 'You are not a member of this tenant.'

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False

        tenant, tenant_user = resolve_tenant_membership(request, view)
        if tenant is None:
            return False

        # Super admin has access to all tenants
        if request.user.is_super_admin:
            return True

        return tenant_user is not None


class IsTenantAdmin(permissions.BasePermission):
    """
    Permission to only allow tenant admins to modify menu content and members
    """
    message = 'Only tenant admins can perform this action.'

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False

        tenant, tenant_user = resolve_tenant_membership(request, view)
        if tenant is None:
            return False

        if request.user.is_super_admin:
            return True

        return tenant_user is not None and tenant_user.is_admin


class TenantReadOrAdminWrite(permissions.BasePermission):
    """
    Members may read; only admins may write
    """
    message = 'Only tenant admins can modify menu content.'

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return HasTenantAccess().has_permission(request, view)
        return IsTenantAdmin().has_permission(request, view)
