"""Tests for notification sinks, handlers and the message bus."""

from __future__ import annotations

from datetime import date, time
from unittest import mock

from django.test import SimpleTestCase

from apps.bookings.domain.events import ReservationCommitted
from apps.contacts.events import ContactReceived
from apps.newsletter.events import SubscriberAdded
from apps.notifications import handlers
from apps.notifications.sinks import (
    Notification,
    NotificationSink,
    NullNotificationSink,
    RecordingNotificationSink,
    dispatch,
)
from apps.reviews.domain.events import ReviewSubmitted
from shared.application.message_bus import MessageBus
from shared.domain.value_objects import Slot


class ExplodingSink(NotificationSink):
    def notify(self, notification: Notification) -> None:
        raise ConnectionError("mail server unreachable")


class DispatchTests(SimpleTestCase):
    def setUp(self) -> None:
        self.notification = Notification("test", "someone@example.com", "Subject", "<p>Body</p>")

    def test_sink_receives_notification(self) -> None:
        sink = RecordingNotificationSink()

        self.assertTrue(dispatch(self.notification, sink=sink))
        self.assertEqual(sink.sent, [self.notification])

    def test_sink_failure_is_contained(self) -> None:
        with self.assertLogs("apps.notifications.sinks", level="ERROR") as logs:
            delivered = dispatch(self.notification, sink=ExplodingSink())

        self.assertFalse(delivered)
        self.assertIn("Notification failure", logs.output[0])

    def test_notification_without_recipient_is_skipped(self) -> None:
        sink = RecordingNotificationSink()

        self.assertFalse(dispatch(Notification("test", "", "Subject", "Body"), sink=sink))
        self.assertEqual(sink.sent, [])

    def test_null_sink_accepts_everything(self) -> None:
        self.assertTrue(dispatch(self.notification, sink=NullNotificationSink()))


class HandlerTests(SimpleTestCase):
    def setUp(self) -> None:
        self.sink = RecordingNotificationSink()
        patcher = mock.patch("apps.notifications.sinks.get_notification_sink", return_value=self.sink)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_reservation_alerts_admin_and_confirms_requester(self) -> None:
        event = ReservationCommitted(
            name="Ada",
            contact="ada@x.com",
            slot=Slot(date(2025, 3, 10), time(10, 0)),
            email="ada@x.com",
        )

        handlers.on_reservation_committed(event)

        self.assertEqual(self.sink.kinds(), ["reservation_admin_alert", "reservation_confirmation"])
        alert, confirmation = self.sink.sent
        self.assertEqual(alert.recipient, "owner@example.com")
        self.assertIn("10:00", alert.html_body)
        self.assertIn("Monday, 10 March 2025", alert.html_body)
        self.assertEqual(confirmation.recipient, "ada@x.com")

    def test_reservation_without_email_only_alerts_admin(self) -> None:
        event = ReservationCommitted(
            name="Ada", contact="+2348000000000", slot=Slot(date(2025, 3, 10), time(10, 0))
        )

        handlers.on_reservation_committed(event)

        self.assertEqual(self.sink.kinds(), ["reservation_admin_alert"])

    def test_review_alert_escapes_user_text(self) -> None:
        event = ReviewSubmitted(name="<b>Bo</b>", project_type="Other", rating=4, body="<script>x</script>")

        handlers.on_review_submitted(event)

        self.assertEqual(self.sink.kinds(), ["review_admin_alert"])
        body = self.sink.sent[0].html_body
        self.assertNotIn("<script>", body)
        self.assertIn("&lt;script&gt;", body)

    def test_review_with_email_is_thanked(self) -> None:
        handlers.on_review_submitted(
            ReviewSubmitted(name="Bo", project_type="Other", rating=4, body="Nice", email="bo@x.com")
        )

        self.assertEqual(self.sink.kinds(), ["review_admin_alert", "review_thanks"])

    def test_subscriber_is_welcomed(self) -> None:
        handlers.on_subscriber_added(SubscriberAdded(email="reader@x.com"))

        self.assertEqual(self.sink.kinds(), ["newsletter_welcome"])
        self.assertEqual(self.sink.sent[0].recipient, "reader@x.com")

    def test_contact_alerts_admin_and_acknowledges_sender(self) -> None:
        handlers.on_contact_received(
            ContactReceived(name="Cy", email="cy@x.com", whatsapp="+2348000000000", services="Branding")
        )

        self.assertEqual(self.sink.kinds(), ["contact_admin_alert", "contact_acknowledgement"])
        self.assertEqual(self.sink.sent[0].subject, "New Contact from Cy")


class MessageBusTests(SimpleTestCase):
    def test_failing_handler_does_not_stop_the_others(self) -> None:
        bus = MessageBus()
        seen = []

        def broken(event):
            raise RuntimeError("boom")

        bus.register_event_handler(SubscriberAdded, broken)
        bus.register_event_handler(SubscriberAdded, seen.append)
        event = SubscriberAdded(email="reader@x.com")

        with self.assertLogs("shared.application.message_bus", level="ERROR"):
            bus.publish_events([event])

        self.assertEqual(seen, [event])

    def test_duplicate_registration_is_ignored(self) -> None:
        bus = MessageBus()
        handlers.register_handlers(bus)
        handlers.register_handlers(bus)

        self.assertEqual(bus.handlers_for(ReservationCommitted), [handlers.on_reservation_committed])
