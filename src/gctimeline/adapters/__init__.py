"""Adapters between raw GC logs and the core."""
