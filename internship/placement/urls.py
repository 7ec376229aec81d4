from django.urls import path
from . import views

app_name = 'placement'

urlpatterns = [
    path('placements/', views.placement_list, name='placement-list'),
    path('placements/me/', views.my_placement, name='placement-me'),
    path('placements/<int:pk>/', views.placement_detail, name='placement-detail'),
]
