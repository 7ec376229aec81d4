"""
Create the first admin account.

Usage:
    python manage.py create_admin --username admin --password secret --name "Administrator"

Values not given on the command line are read from ADMIN_USERNAME,
ADMIN_PASSWORD and ADMIN_NAME. Running it again for an existing username
does nothing.
"""
import os

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from core.user_accounts.models import Role, User


class Command(BaseCommand):
    help = 'Create an admin account (idempotent)'

    def add_arguments(self, parser):
        parser.add_argument('--username', default=os.getenv('ADMIN_USERNAME', 'admin'))
        parser.add_argument('--password', default=os.getenv('ADMIN_PASSWORD'))
        parser.add_argument('--name', default=os.getenv('ADMIN_NAME', 'Administrator'))

    def handle(self, *args, **options):
        username = options['username']
        password = options['password']

        if not password:
            raise CommandError('A password is required (--password or ADMIN_PASSWORD).')

        if User.objects.filter(username=username).exists():
            self.stdout.write(f"  - Account already exists: {username}")
            return

        with transaction.atomic():
            User.objects.create_user(
                username=username,
                nama_lengkap=options['name'],
                password=password,
                role=Role.ADMIN,
            )

        self.stdout.write(self.style.SUCCESS(f"✓ Created admin account: {username}"))
