"""Feature Request Board backend."""
