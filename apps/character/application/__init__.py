"""Character application layer."""
