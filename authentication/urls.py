from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from . import views

urlpatterns = [
    # =============== API DOCUMENTATION ===============
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # =============== AUTHENTICATION ===============
    path('auth/login/', views.CustomTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # =============== USER PROFILE ===============
    path('profile/', views.MyProfileView.as_view(), name='my_profile'),

    # =============== TENANT MEMBERS ===============
    path('tenants/<str:tenant_code>/role/', views.my_tenant_role, name='my_tenant_role'),
    path('tenants/<str:tenant_code>/users/', views.TenantUserListCreateView.as_view(), name='tenant_user_list_create'),
    path('tenants/<str:tenant_code>/users/<uuid:member_id>/', views.TenantUserDetailView.as_view(), name='tenant_user_detail'),

    # =============== SYSTEM ===============
    path('health/', views.health_check, name='health_check'),
]
