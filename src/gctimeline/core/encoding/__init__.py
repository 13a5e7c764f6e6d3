"""Encoders for aggregated data."""
