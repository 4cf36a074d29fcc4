"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Configuration and the dependency container

The core module has NO dependencies on other application layers.
"""
