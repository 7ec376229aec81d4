"""
Serializers for Company model
"""
from rest_framework import serializers

from .dtos import CompanyCreateDTO, CompanyUpdateDTO
from .models import Company


class CompanyReadSerializer(serializers.ModelSerializer):
    """Read serializer for Company model"""

    class Meta:
        model = Company
        fields = ['id', 'nama_perusahaan', 'alamat', 'kontak', 'created_at', 'updated_at']
        read_only_fields = fields


class CompanyCreateSerializer(serializers.Serializer):
    """Write serializer for creating a company"""
    nama_perusahaan = serializers.CharField(max_length=255, required=False, allow_blank=True)
    alamat = serializers.CharField(required=False, allow_blank=True)
    kontak = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def to_dto(self) -> CompanyCreateDTO:
        return CompanyCreateDTO(**self.validated_data)


class CompanyUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a company"""
    nama_perusahaan = serializers.CharField(max_length=255, required=False, allow_blank=True)
    alamat = serializers.CharField(required=False, allow_blank=True)
    kontak = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def to_dto(self, company_id) -> CompanyUpdateDTO:
        return CompanyUpdateDTO(company_id=company_id, **self.validated_data)
