"""
In-memory catalog of authors and their published works.

This package contains:
- Pydantic models for authors and works
- The immutable catalog store, sorted with Spanish collation
- Pure query functions used by the HTTP layer
"""
