from rest_framework import generics, status
from rest_framework.decorators import api_view
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters
from django.http import Http404
from django.shortcuts import get_object_or_404

from authentication.permissions import CanManageCatalog
from .models import Category, MenuItem, Status
from .serializers import CategorySerializer, MenuItemSerializer


class CatalogPermissionMixin:
    """Reads are open to any signed-in user, writes need manage_catalog"""

    def get_permissions(self):
        if self.request.method in ['POST', 'PUT', 'PATCH', 'DELETE']:
            return [CanManageCatalog()]
        return [IsAuthenticated()]


class SoftDestroyMixin:
    """DELETE marks the row INACTIVE instead of removing it"""
    not_found_message = 'Not found'

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        instance.soft_delete()
        return Response({'deleted': True}, status=status.HTTP_200_OK)


# Category Views
class CategoryListCreateView(CatalogPermissionMixin, generics.ListCreateAPIView):
    """
    get: List active categories
    post: Create a new category
    """
    queryset = Category.objects.active()
    serializer_class = CategorySerializer
    pagination_class = None
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering = ['name']


class CategoryRetrieveUpdateDestroyView(CatalogPermissionMixin, SoftDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    get: Category details, inactive categories included
    put/patch: Update name, description or status
    delete: Soft delete (status -> INACTIVE)
    """
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    not_found_message = 'Category not found'


# Menu Item Views
class MenuItemListCreateView(CatalogPermissionMixin, generics.ListCreateAPIView):
    """
    get: List available menu items whose category is active
    post: Create a menu item in an active category
    """
    queryset = MenuItem.objects.active().filter(
        category__status=Status.ACTIVE
    ).select_related('category')
    serializer_class = MenuItemSerializer
    pagination_class = None
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['category']
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'price', 'created_at']
    ordering = ['name']


class MenuItemRetrieveUpdateDestroyView(CatalogPermissionMixin, SoftDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    get: Menu item details, unavailable items included
    put/patch: Update menu item, a new category must be active
    delete: Soft delete (status -> INACTIVE)
    """
    queryset = MenuItem.objects.select_related('category')
    serializer_class = MenuItemSerializer
    not_found_message = 'Menu item not found'


@api_view(['GET'])
def menu_by_category(request, category_id):
    """Available menu items of one category"""
    category = get_object_or_404(Category, id=category_id)

    menu_items = MenuItem.objects.active().filter(
        category=category
    ).select_related('category')

    serializer = MenuItemSerializer(menu_items, many=True)
    return Response({
        'category': CategorySerializer(category).data,
        'menu_items': serializer.data
    })
