from rest_framework import serializers
from .models import MenuItem
from .ordering import MenuOrdering


class MenuItemSerializer(serializers.ModelSerializer):
    id = serializers.CharField(source='item_id', read_only=True)
    videoUrl = serializers.CharField(source='video_url', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            'id', 'title', 'category', 'subcategory', 'description',
            'videoUrl', 'steps', 'updatedAt', 'createdAt'
        ]


class MenuItemUpsertSerializer(serializers.Serializer):
    itemId = serializers.CharField(source='item_id', max_length=128, required=False)
    title = serializers.CharField(max_length=255, error_messages={'blank': 'Title is required'})
    category = serializers.CharField(max_length=255, error_messages={'blank': 'Category is required'})
    subcategory = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    videoUrl = serializers.URLField(
        source='video_url', max_length=1000, required=False, allow_blank=True, allow_null=True,
        error_messages={'invalid': 'Video URL must be valid'}
    )
    steps = serializers.ListField(child=serializers.CharField(), required=False)

    def validate(self, attrs):
        if not attrs.get('description') and not attrs.get('video_url'):
            raise serializers.ValidationError({
                'description': 'Provide a description or a video URL before posting'
            })
        return attrs


class MenuOrderingField(serializers.Field):
    """Accept any JSON object and normalize it into a MenuOrdering"""

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            raise serializers.ValidationError('Ordering must be an object')
        return MenuOrdering.from_payload(data)

    def to_representation(self, value):
        return value.to_payload()


class MenuStateSerializer(serializers.Serializer):
    items = MenuItemSerializer(many=True)
    ordering = MenuOrderingField()


class MenuSubCategorySerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    items = MenuItemSerializer(many=True)


class MenuCategorySerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    subCategories = MenuSubCategorySerializer(source='sub_categories', many=True)


class MenuMoveSerializer(serializers.Serializer):
    MOVE_TYPES = ['category', 'subcategory', 'item']

    type = serializers.ChoiceField(choices=MOVE_TYPES)
    categoryId = serializers.CharField(source='category_id')
    subcategoryId = serializers.CharField(source='subcategory_id', required=False, default=None)
    itemId = serializers.CharField(source='item_id', required=False, default=None)
    targetCategoryId = serializers.CharField(source='target_category_id', required=False, default=None)
    targetSubcategoryId = serializers.CharField(source='target_subcategory_id', required=False, default=None)
    index = serializers.IntegerField()

    def validate(self, attrs):
        if attrs['type'] in ('subcategory', 'item') and not attrs.get('subcategory_id'):
            raise serializers.ValidationError({'subcategoryId': 'This field is required.'})
        if attrs['type'] == 'item' and not attrs.get('item_id'):
            raise serializers.ValidationError({'itemId': 'This field is required.'})
        return attrs


class MenuSummarySerializer(serializers.Serializer):
    total_categories = serializers.IntegerField()
    total_subcategories = serializers.IntegerField()
    total_items = serializers.IntegerField()
    items_with_video = serializers.IntegerField()


class MenuTenantInfoSerializer(serializers.Serializer):
    name = serializers.CharField()
    tenant_code = serializers.CharField()


class MenuSummaryResponseSerializer(serializers.Serializer):
    tenant_info = MenuTenantInfoSerializer(source='tenant')
    menu_stats = MenuSummarySerializer()
