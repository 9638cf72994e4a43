"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Lets the core depend on abstractions instead of on httpx.
"""
