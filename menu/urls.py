from django.urls import path, include
from . import views


urlpatterns = [
    # Menu state (items + ordering) and upsert
    path('<str:tenant_code>/', views.MenuStateView.as_view(), name='menu-state'),
    path('<str:tenant_code>/tree/', views.MenuTreeView.as_view(), name='menu-tree'),

    # Menu item URLs
    path('<str:tenant_code>/items/', views.MenuItemListView.as_view(), name='menu-item-list'),
    path('<str:tenant_code>/items/<str:item_id>/', views.MenuItemDetailView.as_view(), name='menu-item-detail'),

    # Ordering URLs
    path('<str:tenant_code>/ordering/', views.MenuOrderingView.as_view(), name='menu-ordering'),
    path('<str:tenant_code>/move/', views.move_menu_entry, name='menu-move'),

    # Additional Menu URLs
    path('<str:tenant_code>/sample/', views.create_sample_menu, name='menu-sample'),
    path('<str:tenant_code>/summary/', views.menu_summary, name='menu-summary'),

    # Training playlist and progress
    path('<str:tenant_code>/training/', include('training.urls')),
]
