"""
FastAPI service for a small in-memory book catalog.

This package provides:
- An in-memory, lock-guarded book store
- Declarative route table with pydantic request/response schemas
- OpenAPI documentation served at /documentation
"""
