from rest_framework import serializers

from blood.groups import BLOOD_GROUP_CODES, normalize_blood_group
from .models import Hospital, BloodStock


class BloodStockSerializer(serializers.ModelSerializer):
    class Meta:
        model = BloodStock
        fields = ["id", "blood_group", "units_available", "updated_at"]
        read_only_fields = fields


class HospitalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Hospital
        fields = ["id", "hospital_code", "name", "city", "address", "phone", "email", "created_at"]
        read_only_fields = fields


class HospitalDirectorySerializer(HospitalSerializer):
    stock = BloodStockSerializer(many=True, read_only=True)

    class Meta(HospitalSerializer.Meta):
        fields = HospitalSerializer.Meta.fields + ["stock"]
        read_only_fields = fields


class StockUpdateSerializer(serializers.Serializer):
    blood_group = serializers.CharField()
    units = serializers.IntegerField(min_value=0)

    def validate_blood_group(self, value):
        group = normalize_blood_group(value)
        if group not in BLOOD_GROUP_CODES:
            raise serializers.ValidationError("Unknown blood group.")
        return group
