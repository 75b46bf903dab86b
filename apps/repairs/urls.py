from django.urls import path
from . import views

app_name = 'repairs'

urlpatterns = [
    # GET  /api/repairs                 - List repair orders (newest first)
    # POST /api/repairs                 - Open repair order
    # PUT  /api/repairs/{id}/status     - Update repair status
    path('repairs', views.repairs, name='repair-list'),
    path('repairs/<uuid:pk>/status', views.repair_status, name='repair-status'),
]
