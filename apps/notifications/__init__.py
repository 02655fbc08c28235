"""Notifications app package.

Best-effort email notifications raised after reservations, reviews,
subscriptions and contact submissions are committed. Delivery goes
through a pluggable ``NotificationSink``; a failing sink is logged and
never changes the outcome of the operation that triggered it.
"""
