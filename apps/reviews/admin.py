"""Admin registration for reviews.

The status field is read-only here: approval goes through the
moderation endpoints so that it stays behind the administrator token.
"""

from __future__ import annotations

from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("name", "project_type", "rating", "status", "created_at")
    list_filter = ("status", "project_type", "rating")
    search_fields = ("name", "body", "company")
    readonly_fields = ("id", "status", "created_at", "updated_at")
