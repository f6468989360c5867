"""
Exception Hierarchy for Hello Threads
Provides standardized error handling with consistent exception types.
"""

from .base import ConfigurationError, HelloThreadsError
from .task import BackgroundTaskFailed, HolderDisposedError

__all__ = [
    "HelloThreadsError",
    "ConfigurationError",
    "BackgroundTaskFailed",
    "HolderDisposedError",
]
