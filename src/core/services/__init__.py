"""Caller-layer services built on top of the core contracts."""
