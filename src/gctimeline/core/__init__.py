"""Core domain: time stamps, events and aggregation."""
