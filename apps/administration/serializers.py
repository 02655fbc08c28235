"""Serializers for administrator endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class AdminLoginSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(trim_whitespace=False)
