"""Authentication & authorization use cases."""
