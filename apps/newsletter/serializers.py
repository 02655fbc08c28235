"""Serializers for newsletter subscriptions."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Subscriber


class SubscribeSerializer(serializers.Serializer):
    email = serializers.EmailField()


class SubscriberSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subscriber
        fields = ["id", "email", "subscribed_at"]
        read_only_fields = fields
