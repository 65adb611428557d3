from rest_framework import serializers

from .models import WillingnessRequest, DonationRecord


class WillingnessRequestSerializer(serializers.ModelSerializer):
    responded_by_name = serializers.SerializerMethodField()

    class Meta:
        model = WillingnessRequest
        fields = [
            "id", "donor", "donor_name", "blood_group", "city", "address",
            "status", "responded_by", "responded_by_name", "responded_at", "created_at",
        ]
        read_only_fields = fields

    def get_responded_by_name(self, obj):
        if obj.responded_by_id is None:
            return None
        return obj.responded_by.name


class RespondSerializer(serializers.Serializer):
    decision = serializers.CharField()


class DonationRecordSerializer(serializers.ModelSerializer):
    hospital_name = serializers.CharField(source="hospital.name", read_only=True)

    class Meta:
        model = DonationRecord
        fields = ["id", "request", "donor", "hospital", "hospital_name", "blood_group", "donation_date"]
        read_only_fields = fields
