"""Contact form submission model."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ContactSubmission(models.Model):
    """An enquiry from the contact page."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=64, blank=True)
    whatsapp = models.CharField(max_length=64)
    brand_about = models.TextField(help_text=_("What the brand is about."))
    goals = models.TextField(help_text=_("What the sender wants to achieve."))
    services = models.CharField(max_length=255, help_text=_("Services the sender is interested in."))
    message = models.TextField(blank=True)
    submitted_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Contact submission")
        verbose_name_plural = _("Contact submissions")
        ordering = ["-submitted_at"]

    def __str__(self) -> str:
        return f"Contact from {self.name} <{self.email}>"
