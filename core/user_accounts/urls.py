"""
URL Configuration for user administration (admin only).
Authentication endpoints are in auth_urls.py
"""
from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    path('users/', views.user_list, name='user_list'),
    # Numeric ids must match before the role segment
    path('users/<int:user_id>/', views.user_detail, name='user_detail'),
    path('users/<str:role>/', views.users_by_role, name='users_by_role'),
]
