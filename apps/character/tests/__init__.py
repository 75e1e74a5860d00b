"""Character service tests."""
