"""Administration app package.

Holds the administrator gate: a single shared secret configured at
startup and presented on every privileged request in the
``X-Admin-Token`` header. There are no sessions, expiry or revocation.
"""
