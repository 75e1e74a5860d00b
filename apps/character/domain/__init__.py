"""Character domain layer."""
