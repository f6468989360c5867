"""
Core Architecture Components

Key Components:
- ConfigManager: Layered configuration with change notifications
- ObservableValue: Single-slot observable value for view state
- TaskScope: Lifetime scope that cancels background workers together
"""

from .config_manager import ConfigManager
from .observable import ObservableValue, Subscription
from .task_scope import TaskScope

__all__ = ['ConfigManager', 'ObservableValue', 'Subscription', 'TaskScope']
