"""Mission Control - dashboard backend for monitoring simulated AI agents."""

__version__ = "0.1.0"
