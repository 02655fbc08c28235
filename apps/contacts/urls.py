"""URL routing for the contact form."""

from django.urls import path  # type: ignore

from .views import ContactView

urlpatterns = [path('', ContactView.as_view(), name='contact-submit')]
