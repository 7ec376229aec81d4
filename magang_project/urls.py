"""
URL configuration for magang_project.

Every API route lives under /api/ with a trailing slash.
"""
from django.contrib import admin
from django.urls import include, path, re_path

from . import views

urlpatterns = [
    path('', views.index, name='index'),
    path('health/', views.health, name='health'),
    path('admin/', admin.site.urls),

    # Authentication (login, register, own profile, password)
    path('api/', include('core.user_accounts.auth_urls')),

    # User administration
    path('api/', include('core.user_accounts.urls')),

    # Companies, placements, logbook, dashboard stats
    path('api/', include('internship.urls')),

    # Uploaded profile photos and logbook evidence
    re_path(r'^api/uploads/(?P<path>.+)$', views.uploaded_file, name='uploads'),
]

handler404 = 'magang_project.views.not_found'
handler500 = 'magang_project.views.server_error'
