from django.contrib import admin
from .models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ['nama_perusahaan', 'kontak', 'lifecycle', 'created_at']
    list_filter = ['lifecycle']
    search_fields = ['nama_perusahaan', 'alamat', 'kontak']

    def get_queryset(self, request):
        return Company.all_objects.all()
