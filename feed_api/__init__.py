"""
Feed API root package.

This package contains the FastAPI app entry point (main.py), the REST and
GraphQL layers, domain models, use cases, and infrastructure (MongoDB,
image storage, WebSocket notifications).
"""
