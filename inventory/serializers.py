from rest_framework import serializers
from .models import Category, MenuItem, Status


class CategorySerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=2, max_length=255)
    items_count = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = ['id', 'name', 'description', 'status', 'items_count', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at', 'items_count']

    def get_items_count(self, obj):
        return obj.items.filter(status=Status.ACTIVE).count()


class MenuItemSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=2, max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category_id = serializers.IntegerField()
    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            'id', 'name', 'description', 'price', 'category_id', 'category_name',
            'status', 'image_url', 'created_at', 'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than zero.")
        return value

    def validate_category_id(self, value):
        """Items may only be created in, or moved to, an active category"""
        if not Category.objects.active().filter(id=value).exists():
            raise serializers.ValidationError("Category not found")
        return value
