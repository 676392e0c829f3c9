from django.urls import path
from . import views


urlpatterns = [
    # Category URLs
    path('categories/', views.CategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/<int:pk>/', views.CategoryRetrieveUpdateDestroyView.as_view(), name='category-detail'),
    path('categories/<int:category_id>/items/', views.menu_by_category, name='menu-by-category'),

    # Menu item URLs
    path('items/', views.MenuItemListCreateView.as_view(), name='menu-item-list-create'),
    path('items/<int:pk>/', views.MenuItemRetrieveUpdateDestroyView.as_view(), name='menu-item-detail'),
]
