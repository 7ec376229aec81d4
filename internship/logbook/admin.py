from django.contrib import admin
from .models import LogbookEntry


@admin.register(LogbookEntry)
class LogbookEntryAdmin(admin.ModelAdmin):
    list_display = ['user', 'tanggal', 'status', 'kehadiran', 'reviewed_by', 'lifecycle']
    list_filter = ['status', 'kehadiran', 'lifecycle']
    search_fields = ['user__nama_lengkap', 'kegiatan']
    date_hierarchy = 'tanggal'

    def get_queryset(self, request):
        return LogbookEntry.all_objects.select_related('user', 'reviewed_by')
