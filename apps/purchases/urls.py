from django.urls import path
from . import views

app_name = 'purchases'

urlpatterns = [
    # POST /api/purchase                        - Process checkout
    # GET  /api/dispatch-records                - List dispatch records (newest first)
    # PUT  /api/dispatch-records/{id}/status    - Update dispatch status
    path('purchase', views.purchase, name='purchase'),
    path('dispatch-records', views.dispatch_records, name='dispatch-record-list'),
    path(
        'dispatch-records/<uuid:pk>/status',
        views.dispatch_record_status,
        name='dispatch-record-status'
    ),
]
