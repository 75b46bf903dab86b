from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter(trailing_slash=False)
router.register(r'inventory', views.ItemViewSet, basename='item')

urlpatterns = [
    # Item ViewSet routes
    # GET    /api/inventory           - List items (category, brand, type, isAvailableForRent)
    # POST   /api/inventory           - Add item
    # GET    /api/inventory/{id}      - Get item
    # PUT    /api/inventory/{id}      - Update item
    # DELETE /api/inventory/{id}      - Delete item

    # GET    /api/bikes               - Bicycles available for rent
    path('bikes', views.available_bikes, name='bikes'),

    path('', include(router.urls)),
]
