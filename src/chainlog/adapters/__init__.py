"""
Adapters that drive other logging libraries through the chainlog API.
"""

from .stdlib import ChainlogHandler, StdlibLogger
from .structlog import StructlogLogger

__all__ = ["ChainlogHandler", "StdlibLogger", "StructlogLogger"]
