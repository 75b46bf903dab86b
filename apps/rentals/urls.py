from django.urls import path
from . import views

app_name = 'rentals'

urlpatterns = [
    # GET  /api/rentals                 - List rentals (newest first)
    # POST /api/rentals                 - Register rental
    # PUT  /api/rentals/{id}/status     - Update rental status
    path('rentals', views.rentals, name='rental-list'),
    path('rentals/<uuid:pk>/status', views.rental_status, name='rental-status'),
]
