from django.contrib import admin
from .models import Placement


@admin.register(Placement)
class PlacementAdmin(admin.ModelAdmin):
    list_display = ['user', 'supervisor', 'company', 'lifecycle', 'created_at']
    list_filter = ['lifecycle', 'company']
    search_fields = ['user__nama_lengkap', 'supervisor__nama_lengkap', 'company__nama_perusahaan']

    def get_queryset(self, request):
        return Placement.all_objects.select_related('user', 'supervisor', 'company')
