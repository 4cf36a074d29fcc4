"""Execution strategy for a purge pass.

Both strategies collect outcomes in registration order; they only differ in
whether store clears overlap in time.
"""

from enum import Enum


class PurgeStrategy(str, Enum):
    """How the coordinator schedules adapter clears."""

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"
