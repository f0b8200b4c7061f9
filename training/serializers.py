from rest_framework import serializers

from menu.serializers import MenuItemSerializer


class TrainingPlaylistSerializer(serializers.Serializer):
    itemIds = serializers.ListField(child=serializers.CharField(), source='item_ids')
    items = MenuItemSerializer(many=True, read_only=True)


class TrainingProgressSerializer(serializers.Serializer):
    completed = serializers.DictField(child=serializers.BooleanField())
    completedCount = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    percent = serializers.IntegerField(read_only=True)
