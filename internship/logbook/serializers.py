"""
Serializers for LogbookEntry model
"""
from rest_framework import serializers

from .dtos import LogbookCreateDTO, LogbookStatusDTO, LogbookUpdateDTO
from .models import LogbookEntry


class LogbookReadSerializer(serializers.ModelSerializer):
    """Read serializer for LogbookEntry model"""
    nama_lengkap = serializers.CharField(source='user.nama_lengkap', read_only=True)
    reviewed_by_name = serializers.SerializerMethodField()

    class Meta:
        model = LogbookEntry
        fields = [
            'id', 'user_id', 'nama_lengkap',
            'tanggal', 'kegiatan', 'bukti_foto', 'kehadiran',
            'status', 'catatan',
            'reviewed_by_id', 'reviewed_by_name', 'reviewed_at',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_reviewed_by_name(self, obj):
        return obj.reviewed_by.nama_lengkap if obj.reviewed_by else None


class LogbookCreateSerializer(serializers.Serializer):
    """
    Write serializer for submitting an entry (multipart).

    Presence of tanggal / kegiatan is checked by LogbookService so a
    missing value is reported as `missing_field`.
    """
    tanggal = serializers.DateField(required=False, allow_null=True)
    kegiatan = serializers.CharField(required=False, allow_blank=True)
    bukti_foto = serializers.FileField(required=False, allow_null=True)
    kehadiran = serializers.CharField(required=False, allow_blank=True)

    def to_dto(self) -> LogbookCreateDTO:
        return LogbookCreateDTO(**self.validated_data)


class LogbookUpdateSerializer(serializers.Serializer):
    """Write serializer for the owner editing an entry"""
    tanggal = serializers.DateField(required=False)
    kegiatan = serializers.CharField(required=False, allow_blank=True)
    bukti_foto = serializers.FileField(required=False)
    kehadiran = serializers.CharField(required=False, allow_blank=True)

    def to_dto(self, entry_id) -> LogbookUpdateDTO:
        return LogbookUpdateDTO(entry_id=entry_id, **self.validated_data)


class LogbookStatusSerializer(serializers.Serializer):
    """
    Write serializer for reviewers.

    The status value is validated by LogbookService (`invalid_status`).
    """
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    catatan = serializers.CharField(required=False, allow_blank=True)

    def to_dto(self, entry_id) -> LogbookStatusDTO:
        return LogbookStatusDTO(entry_id=entry_id, **self.validated_data)
