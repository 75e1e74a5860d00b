"""Character lifecycle use cases."""
