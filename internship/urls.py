"""
URL configuration for the internship apps, mounted under /api/.
"""
from django.urls import include, path

urlpatterns = [
    path('', include('internship.company.urls')),
    path('', include('internship.placement.urls')),
    path('', include('internship.logbook.urls')),
    path('', include('internship.dashboard.urls')),
]
