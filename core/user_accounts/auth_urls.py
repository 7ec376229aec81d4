"""
URL Configuration for Authentication endpoints.
Login, registration, own profile and password change.
User administration endpoints are in urls.py
"""
from django.urls import path, re_path
from . import views

app_name = 'auth'

urlpatterns = [
    # Registration and Login; public clients post with or without the trailing slash
    re_path(r'^login/?$', views.login, name='login'),
    re_path(r'^register/?$', views.register, name='register'),

    # Own account
    path('auth/me/', views.me, name='me'),
    path('auth/change-password/', views.change_password, name='change_password'),
]
