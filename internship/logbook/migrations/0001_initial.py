import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import core.base.uploads


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='LogbookEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('lifecycle', models.CharField(choices=[('active', 'Active'), ('deleted', 'Deleted')], db_index=True, default='active', help_text='Record lifecycle. Set to DELETED instead of deleting.', max_length=10)),
                ('deleted_at', models.DateTimeField(blank=True, editable=False, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('tanggal', models.DateField()),
                ('kegiatan', models.TextField()),
                ('bukti_foto', models.FileField(blank=True, max_length=255, null=True, upload_to=core.base.uploads.evidence_path)),
                ('kehadiran', models.CharField(blank=True, choices=[('hadir', 'Hadir'), ('izin', 'Izin'), ('sakit', 'Sakit')], default='', max_length=10)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], db_index=True, default='pending', max_length=10)),
                ('catatan', models.TextField(blank=True, default='')),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_logbook_entries', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='logbook_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Logbook Entry',
                'verbose_name_plural': 'Logbook Entries',
                'db_table': 'logbooks',
                'ordering': ['-tanggal', '-id'],
                'indexes': [models.Index(fields=['user', 'tanggal'], name='logbook_user_date_idx')],
            },
        ),
    ]
