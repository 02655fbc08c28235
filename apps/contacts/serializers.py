"""Serializers for contact submissions."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import ContactSubmission


class ContactSubmissionCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactSubmission
        fields = [
            "name",
            "email",
            "phone",
            "whatsapp",
            "brand_about",
            "goals",
            "services",
            "message",
        ]
        extra_kwargs = {
            "phone": {"required": False, "allow_blank": True},
            "message": {"required": False, "allow_blank": True},
        }


class ContactSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactSubmission
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "whatsapp",
            "brand_about",
            "goals",
            "services",
            "message",
            "submitted_at",
        ]
        read_only_fields = fields
