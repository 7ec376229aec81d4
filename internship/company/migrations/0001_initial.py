from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Company',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('lifecycle', models.CharField(choices=[('active', 'Active'), ('deleted', 'Deleted')], db_index=True, default='active', help_text='Record lifecycle. Set to DELETED instead of deleting.', max_length=10)),
                ('deleted_at', models.DateTimeField(blank=True, editable=False, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('nama_perusahaan', models.CharField(max_length=255)),
                ('alamat', models.TextField(blank=True, default='')),
                ('kontak', models.CharField(blank=True, default='', max_length=255)),
            ],
            options={
                'verbose_name': 'Company',
                'verbose_name_plural': 'Companies',
                'db_table': 'companies',
                'ordering': ['-id'],
            },
        ),
    ]
