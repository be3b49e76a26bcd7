"""Logging and metrics for valuescope."""
