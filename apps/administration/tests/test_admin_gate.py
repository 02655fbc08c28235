"""Tests for the administrator gate, login and utility endpoints."""

from __future__ import annotations

from unittest import mock

from django.core import mail
from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.administration.gate import AdminGate, get_admin_gate

ADMIN_TOKEN = "test-admin-secret"


class AdminGateTests(SimpleTestCase):
    def test_accepts_only_the_configured_secret(self) -> None:
        gate = AdminGate("s3cret")

        self.assertTrue(gate.enabled)
        self.assertTrue(gate.authorize("s3cret"))
        self.assertFalse(gate.authorize("s3cret "))
        self.assertFalse(gate.authorize("S3CRET"))
        self.assertFalse(gate.authorize(""))
        self.assertFalse(gate.authorize(None))

    def test_empty_secret_disables_every_privileged_call(self) -> None:
        gate = AdminGate("")

        self.assertFalse(gate.enabled)
        self.assertFalse(gate.authorize(""))
        self.assertFalse(gate.authorize("anything"))

    def test_non_ascii_tokens_are_compared_safely(self) -> None:
        gate = AdminGate("pässwörd")

        self.assertTrue(gate.authorize("pässwörd"))
        self.assertFalse(gate.authorize("passwort"))

    @override_settings(ADMIN_SECRET="from-settings")
    def test_process_gate_is_built_once_from_settings(self) -> None:
        get_admin_gate.cache_clear()
        try:
            gate = get_admin_gate()
            self.assertIs(get_admin_gate(), gate)
            self.assertTrue(gate.authorize("from-settings"))
        finally:
            get_admin_gate.cache_clear()


class AdminLoginAPITests(APITestCase):
    def setUp(self) -> None:
        get_admin_gate.cache_clear()
        self.url = reverse("admin-login")

    def test_correct_password_returns_token(self) -> None:
        response = self.client.post(self.url, {"email": "owner@example.com", "password": ADMIN_TOKEN}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["token"], ADMIN_TOKEN)

    def test_token_from_login_unlocks_privileged_endpoints(self) -> None:
        login = self.client.post(self.url, {"password": ADMIN_TOKEN}, format="json")
        self.client.credentials(HTTP_X_ADMIN_TOKEN=login.data["token"])

        response = self.client.get(reverse("admin-subscriber-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_wrong_password_is_refused(self) -> None:
        response = self.client.post(self.url, {"password": "wrong"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "Invalid credentials")

    @override_settings(ADMIN_SECRET="")
    def test_login_disabled_without_secret(self) -> None:
        get_admin_gate.cache_clear()
        try:
            response = self.client.post(self.url, {"password": "anything"}, format="json")
        finally:
            get_admin_gate.cache_clear()

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    @override_settings(ADMIN_SECRET="")
    def test_privileged_endpoints_disabled_without_secret(self) -> None:
        get_admin_gate.cache_clear()
        self.client.credentials(HTTP_X_ADMIN_TOKEN="anything")
        try:
            response = self.client.get(reverse("admin-review-list"))
        finally:
            get_admin_gate.cache_clear()

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class UtilityEndpointTests(APITestCase):
    def setUp(self) -> None:
        get_admin_gate.cache_clear()

    def test_health_check(self) -> None:
        response = self.client.get(reverse("health"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"ok": True})

    def test_health_check_ignores_stale_admin_token(self) -> None:
        self.client.credentials(HTTP_X_ADMIN_TOKEN="stale")

        response = self.client.get(reverse("health"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_test_email_requires_admin(self) -> None:
        response = self.client.post(reverse("admin-test-email"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(len(mail.outbox), 0)

    def test_test_email_is_sent_to_admin(self) -> None:
        self.client.credentials(HTTP_X_ADMIN_TOKEN=ADMIN_TOKEN)

        response = self.client.post(reverse("admin-test-email"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["owner@example.com"])
        self.assertEqual(mail.outbox[0].subject, "TMB SMTP Test Email")

    def test_test_email_failure_is_reported(self) -> None:
        self.client.credentials(HTTP_X_ADMIN_TOKEN=ADMIN_TOKEN)

        with mock.patch("apps.notifications.services.send_mail", side_effect=OSError("smtp down")):
            response = self.client.post(reverse("admin-test-email"))

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)

    def test_schema_is_served(self) -> None:
        response = self.client.get(reverse("schema"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
