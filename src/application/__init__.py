"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (secure logout)
- services/: Invalidation registry, purge coordinator, transition guard

The application layer orchestrates domain logic; store and auth specifics
live in infrastructure adapters injected through protocols.
"""
