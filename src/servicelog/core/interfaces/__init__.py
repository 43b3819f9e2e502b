"""
Core Interfaces

Protocols the logger depends on, implemented in the infrastructure layer.
"""

from servicelog.core.interfaces.sink import LineSink

__all__ = ["LineSink"]
