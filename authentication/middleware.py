# =============== MIDDLEWARE FOR TENANT CONTEXT ===============
from django.conf import settings


class TenantContextMiddleware:
    """
    Middleware to add tenant context to requests
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # Extract tenant_code from various sources
        tenant_code = request.META.get('HTTP_X_TENANT_CODE')

        if not tenant_code:
            tenant_code = request.GET.get('tenant_code')

        if not tenant_code:
            # Try to extract from path
            path_parts = request.path.strip('/').split('/')
            for marker in ('menu', 'tenants'):
                if marker in path_parts:
                    marker_index = path_parts.index(marker)
                    if len(path_parts) > marker_index + 1:
                        tenant_code = path_parts[marker_index + 1]
                        break

        request.tenant_code = tenant_code or settings.MENTRA_DEFAULT_TENANT

        response = self.get_response(request)
        return response
