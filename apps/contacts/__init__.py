"""Contacts app package: enquiries sent through the contact form."""
