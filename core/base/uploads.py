"""
Upload naming and validation shared by profile photos and logbook evidence.

Stored files are named `<field>-<epoch ms>-<9 random digits><ext>` and
kept flat under MEDIA_ROOT, which is served at MEDIA_URL (/api/uploads/).
"""
import os
import secrets
import time

from django.conf import settings

from core.base.exceptions import FileTooLarge, FileTypeRejected


def build_upload_name(field_name, filename):
    """
    Example:
        build_upload_name('bukti_foto', 'IMG_01.JPG')
        -> 'bukti_foto-1718000000000-042137981.jpg'
    """
    ext = os.path.splitext(filename or '')[1].lower()
    stamp = int(time.time() * 1000)
    suffix = f'{secrets.randbelow(10 ** 9):09d}'
    return f'{field_name}-{stamp}-{suffix}{ext}'


def validate_upload(uploaded_file):
    """
    Reject files with a disallowed extension or above MAX_UPLOAD_SIZE.

    Raises:
        FileTypeRejected
        FileTooLarge
    """
    if uploaded_file is None:
        return None

    ext = os.path.splitext(uploaded_file.name or '')[1].lower()
    allowed = settings.ALLOWED_UPLOAD_EXTENSIONS
    if ext not in allowed:
        raise FileTypeRejected(
            f"File type '{ext or 'none'}' is not allowed. Allowed: {', '.join(e.lstrip('.') for e in allowed)}."
        )

    if uploaded_file.size > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE / (1024 * 1024)
        raise FileTooLarge(f'File exceeds the {limit_mb:g} MB limit.')

    return uploaded_file


def profile_photo_path(instance, filename):
    return build_upload_name('foto_profil', filename)


def evidence_path(instance, filename):
    return build_upload_name('bukti_foto', filename)
