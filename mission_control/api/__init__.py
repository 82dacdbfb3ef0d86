"""HTTP API for Mission Control."""
