from django.urls import path
from . import views

app_name = 'company'

urlpatterns = [
    path('companies/', views.company_list, name='company-list'),
    path('companies/<int:pk>/', views.company_detail, name='company-detail'),
]
