"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: Offline trip/expense cache (SQLAlchemy over SQLite)
- storage/: Local key-value storage (Redis) and the on-disk response cache
- stores/: Store adapters that clear those stores on secure logout
- auth/: Auth provider session terminator (httpx)
- logging/: Structured logging adapters (structlog)
- events/: In-memory event bus and event handlers

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
