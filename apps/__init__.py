"""Backend applications."""
