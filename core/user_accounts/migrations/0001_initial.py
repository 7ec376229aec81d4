import django.db.models.deletion
from django.db import migrations, models

import core.base.uploads
import core.user_accounts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('company', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('lifecycle', models.CharField(choices=[('active', 'Active'), ('deleted', 'Deleted')], db_index=True, default='active', help_text='Record lifecycle. Set to DELETED instead of deleting.', max_length=10)),
                ('deleted_at', models.DateTimeField(blank=True, editable=False, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('username', models.CharField(db_index=True, max_length=150)),
                ('nama_lengkap', models.CharField(max_length=255)),
                ('role', models.CharField(choices=[('admin', 'Admin'), ('supervisor', 'Supervisor'), ('peserta', 'Peserta')], db_index=True, default='peserta', max_length=20)),
                ('foto_profil', models.FileField(blank=True, max_length=255, null=True, upload_to=core.base.uploads.profile_photo_path)),
                ('nim', models.CharField(blank=True, default='', max_length=50)),
                ('jurusan', models.CharField(blank=True, default='', max_length=255)),
                ('no_hp', models.CharField(blank=True, default='', max_length=30)),
                ('status_laporan', models.CharField(choices=[('locked', 'Locked'), ('active', 'Active')], default='locked', help_text='Participants may submit logbook entries only while active', max_length=10)),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='users', to='company.company')),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
                'db_table': 'users',
                'ordering': ['id'],
                'constraints': [models.UniqueConstraint(condition=models.Q(('lifecycle', 'active')), fields=('username',), name='unique_active_username')],
            },
            managers=[
                ('objects', core.user_accounts.models.UserManager()),
            ],
        ),
    ]
