"""
Hello Threads

A PyQt6 sample of the UI state holder pattern: a click starts a delayed
background task, whose result is pushed back to the window as an observable
value that the window shows once and then clears.
"""

__version__ = "0.1.0"
