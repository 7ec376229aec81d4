from rest_framework import serializers

from .dtos import PlacementCreateDTO, PlacementUpdateDTO
from .models import Placement


class PlacementReadSerializer(serializers.ModelSerializer):
    """Read serializer for Placement model"""
    peserta = serializers.CharField(source='user.nama_lengkap', read_only=True)
    supervisor = serializers.CharField(source='supervisor.nama_lengkap', read_only=True)
    nama_perusahaan = serializers.CharField(source='company.nama_perusahaan', read_only=True)

    class Meta:
        model = Placement
        fields = [
            'id',
            'user_id', 'peserta',
            'supervisor_id', 'supervisor',
            'company_id', 'nama_perusahaan',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class PlacementCreateSerializer(serializers.Serializer):
    """Write serializer for creating a placement"""
    user_id = serializers.IntegerField(required=False, allow_null=True)
    supervisor_id = serializers.IntegerField(required=False, allow_null=True)
    company_id = serializers.IntegerField(required=False, allow_null=True)

    def to_dto(self) -> PlacementCreateDTO:
        return PlacementCreateDTO(**self.validated_data)


class PlacementUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a placement"""
    user_id = serializers.IntegerField(required=False)
    supervisor_id = serializers.IntegerField(required=False)
    company_id = serializers.IntegerField(required=False)

    def to_dto(self, placement_id) -> PlacementUpdateDTO:
        return PlacementUpdateDTO(placement_id=placement_id, **self.validated_data)
