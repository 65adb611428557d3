from django.conf import settings
from django.db import IntegrityError, transaction
from rest_framework import serializers

from blood.groups import BLOOD_GROUP_CODES
from hospitals.models import Hospital
from .models import CustomUser, DonorProfile, DONOR_MIN_AGE, DONOR_MAX_AGE

EMAIL_TAKEN = "An account with this email already exists."
HOSPITAL_CODE_TAKEN = "Hospital ID already exists."


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ["id", "email", "is_staff"]


class DonorProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = DonorProfile
        fields = ["id", "full_name", "age", "blood_group", "city", "address", "phone", "avatar", "created_at"]
        read_only_fields = fields


class _AccountFields(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)

    def validate_email(self, value):
        value = value.strip().lower()
        if CustomUser.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError(EMAIL_TAKEN)
        return value

    def _create_user(self, validated_data):
        email = validated_data.pop("email")
        password = validated_data.pop("password")
        return CustomUser.objects.create_user(username=email, email=email, password=password)


class DonorRegistrationSerializer(_AccountFields):
    full_name = serializers.CharField(min_length=2, max_length=200)
    age = serializers.IntegerField(
        min_value=DONOR_MIN_AGE, max_value=DONOR_MAX_AGE,
        error_messages={
            "min_value": "Must be at least 18 years old.",
            "max_value": "Must be 65 or younger.",
        },
    )
    blood_group = serializers.ChoiceField(choices=BLOOD_GROUP_CODES)
    city = serializers.CharField(min_length=2, max_length=100)
    address = serializers.CharField(min_length=5, max_length=255)
    phone = serializers.CharField(min_length=10, max_length=30)
    avatar = serializers.ImageField(required=False, allow_null=True)

    def validate_avatar(self, value):
        if value is None:
            return value
        limit = int(getattr(settings, "BC_AVATAR_MAX_BYTES", 2 * 1024 * 1024))
        if value.size > limit:
            raise serializers.ValidationError(f"Please select an image under {limit // (1024 * 1024)}MB.")
        return value

    @transaction.atomic
    def create(self, validated_data):
        user = self._create_user(validated_data)
        return DonorProfile.objects.create(user=user, **validated_data)


class HospitalRegistrationSerializer(_AccountFields):
    hospital_code = serializers.CharField(min_length=3, max_length=50)
    name = serializers.CharField(min_length=2, max_length=200)
    city = serializers.CharField(min_length=2, max_length=100)
    address = serializers.CharField(min_length=5, max_length=255)
    phone = serializers.CharField(min_length=10, max_length=30)

    def validate_hospital_code(self, value):
        value = value.strip()
        if Hospital.objects.filter(hospital_code__iexact=value).exists():
            raise serializers.ValidationError(HOSPITAL_CODE_TAKEN)
        return value

    def create(self, validated_data):
        email = validated_data["email"]
        try:
            with transaction.atomic():
                user = self._create_user(validated_data)
                return Hospital.objects.create(user=user, email=email, **validated_data)
        except IntegrityError:
            # lost a race with a concurrent registration; report the field that clashed
            if CustomUser.objects.filter(email__iexact=email).exists():
                raise serializers.ValidationError({"email": [EMAIL_TAKEN]})
            raise serializers.ValidationError({"hospital_code": [HOSPITAL_CODE_TAKEN]})


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
