"""Adapters: concrete I/O (HTTP via httpx, local filesystem, JSON codecs)."""
