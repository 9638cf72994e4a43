"""Adapters: concrete I/O (HTTP, files) behind the core contracts."""
