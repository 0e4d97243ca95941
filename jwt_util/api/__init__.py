"""Framework-facing helpers."""
