from django.urls import path
from . import views

app_name = 'logbook'

urlpatterns = [
    path('logbook/', views.logbook_collection, name='logbook-list'),
    path('logbook/me/', views.my_logbook, name='logbook-me'),
    path('logbook/supervisor/', views.supervisor_logbook, name='logbook-supervisor'),
    path('logbook/<int:pk>/', views.logbook_detail, name='logbook-detail'),
    path('logbook-status/<int:pk>/', views.logbook_status, name='logbook-status'),
]
