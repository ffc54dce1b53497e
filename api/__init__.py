"""
FastAPI application serving the ebooks catalog.

This package provides:
- Catalog lookups by surname, full name, name and surname prefix
- Work lookups by edition year
- Static landing and not-found pages
"""
