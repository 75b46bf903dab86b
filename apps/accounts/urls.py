from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # POST /api/register        - Create customer account
    # POST /api/login           - Customer login
    # POST /api/employee/login  - Employee/admin login
    path('register', views.register, name='register'),
    path('login', views.login, name='login'),
    path('employee/login', views.employee_login, name='employee-login'),
]
