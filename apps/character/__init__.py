"""Character Sheet Service."""
