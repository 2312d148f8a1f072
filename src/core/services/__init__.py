"""Pipelines composed from the I/O steps."""
