"""
Application Layer

The service Logger, wiring options, rendering and sinks together.
"""

from servicelog.application.logger import Logger

__all__ = ["Logger"]
