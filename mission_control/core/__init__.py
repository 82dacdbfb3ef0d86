"""Core utilities: configuration, logging and time handling."""
