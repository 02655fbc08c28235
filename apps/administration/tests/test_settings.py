"""Tests for the environment-driven production settings."""

from __future__ import annotations

import importlib
import os
import sys
from unittest import mock

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase


PRODUCTION_MODULES = ("config.settings.prod", "config.settings.base")


def load_production_settings():
    """Import the production settings afresh against the current environment."""
    for name in PRODUCTION_MODULES:
        sys.modules.pop(name, None)
    return importlib.import_module("config.settings.prod")


class ProductionSettingsTests(SimpleTestCase):
    def tearDown(self) -> None:
        for name in PRODUCTION_MODULES:
            sys.modules.pop(name, None)

    def test_values_come_from_environment(self) -> None:
        env = {
            "DJANGO_SECRET_KEY": "prod-key",
            "DJANGO_ALLOWED_HOSTS": "tmb.it.com,api.tmb.it.com",
            "EMAIL_PORT": "465",
        }
        with mock.patch.dict(os.environ, env):
            prod = load_production_settings()

        self.assertFalse(prod.DEBUG)
        self.assertEqual(prod.SECRET_KEY, "prod-key")
        self.assertEqual(prod.ALLOWED_HOSTS, ["tmb.it.com", "api.tmb.it.com"])
        self.assertEqual(prod.EMAIL_PORT, 465)

    def test_missing_secret_key_stops_startup(self) -> None:
        with mock.patch.dict(os.environ, {"DJANGO_SECRET_KEY": ""}):
            with self.assertRaises(ImproperlyConfigured):
                load_production_settings()

    def test_sqlite_writers_lock_at_begin(self) -> None:
        with mock.patch.dict(os.environ, {"DJANGO_SECRET_KEY": "prod-key", "DB_ENGINE": "django.db.backends.sqlite3"}):
            prod = load_production_settings()

        self.assertEqual(prod.DATABASES["default"]["OPTIONS"]["transaction_mode"], "IMMEDIATE")
