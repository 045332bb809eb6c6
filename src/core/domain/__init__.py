"""Domain models and entities.

Why here:
- Pure data structures (Pydantic v2) describing operands and failures.
- The domain knows nothing about the CLI or the console.
"""
