"""Integration tests for the contact form endpoints."""

from __future__ import annotations

from django.core import mail
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.administration.gate import get_admin_gate
from apps.contacts.models import ContactSubmission


class ContactAPITests(APITestCase):
    def setUp(self) -> None:
        get_admin_gate.cache_clear()
        self.url = reverse("contact-submit")
        self.payload = {
            "name": "Cy",
            "email": "cy@example.com",
            "whatsapp": "+2348000000000",
            "brand_about": "A lifestyle brand",
            "goals": "A new website",
            "services": "Web Development",
        }

    def test_submit_contact(self) -> None:
        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["ok"])
        submission = ContactSubmission.objects.get(pk=response.data["id"])
        self.assertEqual(submission.phone, "")
        self.assertEqual(submission.message, "")

    def test_submission_notifies_after_commit(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            self.client.post(self.url, self.payload, format="json")

        self.assertEqual(
            [message.subject for message in mail.outbox],
            ["New Contact from Cy", "Message received"],
        )
        self.assertEqual(mail.outbox[1].to, ["cy@example.com"])

    def test_required_fields(self) -> None:
        payload = dict(self.payload)
        del payload["whatsapp"]
        payload["email"] = "nope"

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("whatsapp", response.data)
        self.assertIn("email", response.data)
        self.assertFalse(ContactSubmission.objects.exists())

    def test_submissions_are_admin_only(self) -> None:
        self.client.post(self.url, self.payload, format="json")
        url = reverse("admin-contact-list")

        self.assertEqual(self.client.get(url).status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.credentials(HTTP_X_ADMIN_TOKEN="test-admin-secret")
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data[0]["name"], "Cy")
