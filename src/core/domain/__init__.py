"""Domain models and result types.

Why:
- Pure, strict data structures (Pydantic v2 + frozen dataclasses).
- The domain knows nothing about HTTP or the CLI: only the records and the
  outcome of fetching them.
"""
