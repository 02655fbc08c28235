"""Newsletter app package: an append-only set of subscriber emails."""
