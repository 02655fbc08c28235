"""URL routing for administrator endpoints of every app."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from apps.bookings.views import AdminReservationViewSet
from apps.contacts.views import AdminContactViewSet
from apps.newsletter.views import AdminSubscriberViewSet
from apps.reviews.views import AdminReviewViewSet

from .views import AdminLoginView, SmtpTestView

router = SimpleRouter()
router.register(r"bookings", AdminReservationViewSet, basename="admin-booking")
router.register(r"reviews", AdminReviewViewSet, basename="admin-review")
router.register(r"newsletter", AdminSubscriberViewSet, basename="admin-subscriber")
router.register(r"contacts", AdminContactViewSet, basename="admin-contact")

urlpatterns = [
    path("login/", AdminLoginView.as_view(), name="admin-login"),
    path("test-email/", SmtpTestView.as_view(), name="admin-test-email"),
    path("", include(router.urls)),
]
