"""Core: configuration, domain models, contracts and services (no I/O)."""
