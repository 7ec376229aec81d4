from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('admin/stats/', views.admin_stats, name='admin-stats'),
    path('supervisor/stats/', views.supervisor_stats, name='supervisor-stats'),
    path('participant/stats/', views.participant_stats, name='participant-stats'),
]
