"""
Scheduling and conflict-resolution engine.

Pure functions and services over in-memory events and tasks: overlap
detection, free-slot search, priority-driven week reorganization and
task rebalancing. Nothing here performs I/O.
"""

__version__ = "0.1.0"
