from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin configuration for User model"""
    list_display = ['username', 'nama_lengkap', 'role', 'company', 'status_laporan', 'lifecycle']
    list_filter = ['role', 'status_laporan', 'lifecycle']
    search_fields = ['username', 'nama_lengkap', 'nim']
    readonly_fields = ['last_login', 'deleted_at', 'created_at', 'updated_at']

    fieldsets = (
        ('User Information', {
            'fields': ('username', 'nama_lengkap', 'foto_profil')
        }),
        ('Participant', {
            'fields': ('nim', 'jurusan', 'no_hp', 'company', 'status_laporan')
        }),
        ('Role & Lifecycle', {
            'fields': ('role', 'lifecycle', 'deleted_at')
        }),
        ('Authentication', {
            'fields': ('password', 'last_login', 'created_at', 'updated_at')
        }),
    )

    def get_queryset(self, request):
        return User.all_objects.select_related('company')
