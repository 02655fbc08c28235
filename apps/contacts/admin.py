from django.contrib import admin

from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "whatsapp", "services", "submitted_at")
    search_fields = ("name", "email", "services")
    readonly_fields = ("id", "submitted_at")
