"""Core configuration, logging and low-level JWT helpers."""
