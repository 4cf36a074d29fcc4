"""Domain layer - Pure business logic.

This layer contains value objects, protocols (ports), errors and domain
events for the secure logout workflow. The domain layer has NO dependencies
on any framework or infrastructure - it is pure Python.

Structure:
- value_objects/: Purge outcomes (immutable, no identity)
- protocols/: Store adapter, logger, event bus and session terminator ports
- events/: Domain events (things that happened during a logout)
- errors/: Store clear and registration errors
- enums/: Transition states and offline sync status
"""
