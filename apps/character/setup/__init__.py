"""Service setup (settings, logging, database, dependency wiring)."""
