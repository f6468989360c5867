"""
Background Task Exception Classes
Errors raised around the lifetime-scoped background work of a state holder.
"""

import logging
from typing import Any, Optional

from .base import HelloThreadsError


class BackgroundTaskFailed(HelloThreadsError):
    """Raised when a background unit of work fails to produce its result."""

    def __init__(self, message: str, task_name: Optional[str] = None, **kwargs: Any):
        """
        Initialize background task failure.

        Args:
            message: Error message, usually "<ExceptionType>: <details>"
            task_name: Name of the failed task
            **kwargs: Additional arguments for base class
        """
        context = kwargs.pop("context", {})
        if task_name:
            context["task"] = task_name

        self.task_name = task_name
        super().__init__(message, context=context, **kwargs)

    def _get_default_user_message(self) -> str:
        return "Background task failed. Please try again."


class HolderDisposedError(HelloThreadsError):
    """Raised when work is launched on a scope that has already been closed."""

    def __init__(self, message: str = "Scope already closed", scope_name: Optional[str] = None, **kwargs: Any):
        context = kwargs.pop("context", {})
        if scope_name:
            context["scope"] = scope_name

        self.scope_name = scope_name
        kwargs.setdefault("log_level", logging.WARNING)
        super().__init__(message, context=context, **kwargs)
