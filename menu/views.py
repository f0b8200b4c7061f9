from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters
from drf_spectacular.utils import extend_schema, OpenApiExample

from authentication.permissions import (
    HasTenantAccess, IsTenantAdmin, TenantReadOrAdminWrite, resolve_tenant_membership
)
from .models import MenuItem
from .samples import SAMPLE_MENU
from .serializers import (
    MenuItemSerializer, MenuItemUpsertSerializer, MenuStateSerializer,
    MenuCategorySerializer, MenuMoveSerializer, MenuOrderingField, MenuSummaryResponseSerializer
)
from . import services


class TenantContextMixin:
    """Mixin to resolve the tenant named in the URL and scope querysets to it"""

    def get_tenant(self):
        tenant, _ = resolve_tenant_membership(self.request, self)
        return tenant

    def get_queryset(self):
        """Filter queryset by the URL tenant"""
        return super().get_queryset().filter(tenant=self.get_tenant())


class MenuStateView(TenantContextMixin, APIView):
    """
    get: Items plus the (repaired) ordering document for a tenant
    post: Create or update a menu item (tenant admins only)
    """
    permission_classes = [TenantReadOrAdminWrite]

    @extend_schema(summary="Load Menu", responses={200: MenuStateSerializer})
    def get(self, request, tenant_code):
        items, ordering = services.load_menu_state(self.get_tenant())
        return Response(MenuStateSerializer({'items': items, 'ordering': ordering}).data)

    @extend_schema(
        summary="Upsert Menu Item",
        description="Omit itemId to create a new item; supply it to update in place.",
        request=MenuItemUpsertSerializer,
        responses={201: MenuItemSerializer},
        examples=[
            OpenApiExample(
                'New Item',
                value={
                    "title": "House Chips & Salsa",
                    "category": "Food",
                    "subcategory": "Snacks",
                    "description": "Crisp kettle chips with salsa roja.",
                    "steps": ["Heat chips", "Plate and serve"]
                }
            )
        ]
    )
    def post(self, request, tenant_code):
        serializer = MenuItemUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = services.upsert_menu_item(self.get_tenant(), serializer.validated_data)
        return Response({'item': MenuItemSerializer(item).data}, status=status.HTTP_201_CREATED)


class MenuTreeView(TenantContextMixin, APIView):
    """
    get: The menu grouped into ordered categories and subcategories
    """
    permission_classes = [HasTenantAccess]

    @extend_schema(summary="Load Grouped Menu")
    def get(self, request, tenant_code):
        categories, ordering = services.load_menu_tree(self.get_tenant())
        return Response({
            'categories': MenuCategorySerializer(categories, many=True).data,
            'ordering': ordering.to_payload(),
        })


class MenuItemListView(TenantContextMixin, generics.ListAPIView):
    """
    get: List, filter and search menu items for the tenant
    """
    queryset = MenuItem.objects.all()
    serializer_class = MenuItemSerializer
    permission_classes = [HasTenantAccess]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['category', 'subcategory']
    search_fields = ['title', 'description', 'category', 'subcategory']
    ordering_fields = ['title', 'created_at', 'updated_at']
    ordering = ['title']


class MenuItemDetailView(TenantContextMixin, APIView):
    """
    get: Get a single menu item
    delete: Delete a menu item and its ordering/playlist references (tenant admins only)
    """
    permission_classes = [TenantReadOrAdminWrite]

    @extend_schema(summary="Get Menu Item", responses={200: MenuItemSerializer})
    def get(self, request, tenant_code, item_id):
        item = services.get_menu_item(self.get_tenant(), item_id)
        return Response({'item': MenuItemSerializer(item).data})

    @extend_schema(summary="Delete Menu Item", responses={204: None})
    def delete(self, request, tenant_code, item_id):
        services.delete_menu_item(self.get_tenant(), item_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MenuOrderingView(TenantContextMixin, APIView):
    """
    get: The tenant's ordering document
    put: Replace the whole ordering document (tenant admins only)
    """
    permission_classes = [TenantReadOrAdminWrite]

    @extend_schema(summary="Get Menu Ordering")
    def get(self, request, tenant_code):
        _, ordering = services.load_menu_state(self.get_tenant())
        return Response(ordering.to_payload())

    @extend_schema(
        summary="Replace Menu Ordering",
        examples=[
            OpenApiExample(
                'Ordering',
                value={
                    "categoryOrder": ["food", "drink"],
                    "subcategoryOrder": {"food": ["mains", "sides"]},
                    "itemOrder": {"food::mains": ["item-1", "item-2"]}
                }
            )
        ]
    )
    def put(self, request, tenant_code):
        ordering = MenuOrderingField().run_validation(request.data)
        saved = services.replace_ordering(self.get_tenant(), ordering)
        return Response(saved.to_payload())


@extend_schema(
    summary="Move Menu Entry",
    description="""
    Apply one drag-reorder gesture. Item moves across subcategories or
    categories also update the item's category fields in the same transaction.
    """,
    request=MenuMoveSerializer,
    examples=[
        OpenApiExample(
            'Move Item To Another Subcategory',
            value={
                "type": "item",
                "categoryId": "food",
                "subcategoryId": "mains",
                "itemId": "item-1",
                "targetCategoryId": "food",
                "targetSubcategoryId": "sides",
                "index": 0
            }
        )
    ]
)
@api_view(['POST'])
@permission_classes([IsTenantAdmin])
def move_menu_entry(request, tenant_code):
    serializer = MenuMoveSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    ordering = services.move_menu_entry(request.tenant, serializer.validated_data)
    items, _ = services.load_menu_state(request.tenant)
    return Response(MenuStateSerializer({'items': items, 'ordering': ordering}).data)


@extend_schema(summary="Create Sample Menu")
@api_view(['POST'])
@permission_classes([IsTenantAdmin])
def create_sample_menu(request, tenant_code):
    """Seed the tenant with the sample training menu"""
    services.apply_sample_menu(request.tenant, SAMPLE_MENU)
    items, ordering = services.load_menu_state(request.tenant)
    return Response(
        MenuStateSerializer({'items': items, 'ordering': ordering}).data,
        status=status.HTTP_201_CREATED
    )


@extend_schema(summary="Menu Summary", responses={200: MenuSummaryResponseSerializer})
@api_view(['GET'])
@permission_classes([HasTenantAccess])
def menu_summary(request, tenant_code):
    """Get menu dashboard counts for the tenant"""
    tenant = request.tenant
    return Response(MenuSummaryResponseSerializer({
        'tenant': tenant,
        'menu_stats': services.menu_summary(tenant),
    }).data)
