from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView
from django.db import transaction
from drf_spectacular.utils import extend_schema, OpenApiExample

from authentication.permissions import HasTenantAccess, IsTenantAdmin, TenantReadOrAdminWrite
from menu import services as menu_services
from menu.serializers import MenuItemSerializer, MenuItemUpsertSerializer
from menu.views import TenantContextMixin
from .serializers import TrainingPlaylistSerializer, TrainingProgressSerializer
from . import services


def _playlist_response(item_ids, items):
    return TrainingPlaylistSerializer({'item_ids': item_ids, 'items': items}).data


class TrainingPlaylistView(TenantContextMixin, APIView):
    """
    get: The tenant's training playlist in order
    put: Replace the playlist (tenant admins only)
    """
    permission_classes = [TenantReadOrAdminWrite]

    @extend_schema(summary="Get Training Playlist", responses={200: TrainingPlaylistSerializer})
    def get(self, request, tenant_code):
        item_ids, items = services.load_playlist(self.get_tenant())
        return Response(_playlist_response(item_ids, items))

    @extend_schema(
        summary="Replace Training Playlist",
        request=TrainingPlaylistSerializer,
        examples=[OpenApiExample('Playlist', value={"itemIds": ["item-2", "item-1"]})]
    )
    def put(self, request, tenant_code):
        serializer = TrainingPlaylistSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item_ids, items = services.replace_playlist(self.get_tenant(), serializer.validated_data['item_ids'])
        return Response(_playlist_response(item_ids, items))


@extend_schema(
    summary="Save Training Item",
    description="Create or update a menu item and make sure it is on the training playlist.",
    request=MenuItemUpsertSerializer,
)
@api_view(['POST'])
@permission_classes([IsTenantAdmin])
def save_training_item(request, tenant_code):
    serializer = MenuItemUpsertSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    with transaction.atomic():
        item = menu_services.upsert_menu_item(request.tenant, serializer.validated_data)
        item_ids = services.add_to_playlist(request.tenant, item.item_id)
    return Response({
        'item': MenuItemSerializer(item).data,
        'itemIds': item_ids,
    }, status=status.HTTP_201_CREATED)


class TrainingProgressView(TenantContextMixin, APIView):
    """
    get: The current user's completion progress
    put: Replace the current user's completion map
    """
    permission_classes = [HasTenantAccess]

    @extend_schema(summary="Get My Training Progress", responses={200: TrainingProgressSerializer})
    def get(self, request, tenant_code):
        return Response(services.load_progress(self.get_tenant(), request.user))

    @extend_schema(
        summary="Replace My Training Progress",
        request=TrainingProgressSerializer,
        examples=[OpenApiExample('Progress', value={"completed": {"item-1": True}})]
    )
    def put(self, request, tenant_code):
        serializer = TrainingProgressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        summary = services.replace_progress(
            self.get_tenant(), request.user, serializer.validated_data['completed']
        )
        return Response(summary)


@extend_schema(summary="Toggle Training Item Completion")
@api_view(['POST'])
@permission_classes([HasTenantAccess])
def toggle_training_item(request, tenant_code, item_id):
    return Response(services.toggle_progress(request.tenant, request.user, item_id))
