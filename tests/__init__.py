"""Test suite for the Half Trip secure logout client.

Test structure:
- unit/: Registry, coordinator, guard and handler logic with store doubles
- integration/: Real SQLite, fakeredis and on-disk stores behind the adapters

No external services are needed: Redis is faked and SQLite runs locally.
"""
