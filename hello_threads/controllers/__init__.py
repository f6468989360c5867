"""
Controllers Module

State holders that sit between the Qt views and background work. Views
forward user intent to a controller and observe the state it publishes.
"""

from .main_view_model import MainViewModel

__all__ = ["MainViewModel"]
