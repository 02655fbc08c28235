"""
Shared Kernel

Base classes and utilities shared by every app of the service:
domain events, the error taxonomy, common value objects, the message
bus and the unit of work that publishes events after commit.
"""
