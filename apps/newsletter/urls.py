"""URL routing for the newsletter."""

from django.urls import path  # type: ignore

from .views import SubscribeView

urlpatterns = [path('', SubscribeView.as_view(), name='newsletter-subscribe')]
