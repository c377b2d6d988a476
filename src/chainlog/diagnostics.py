"""
Internal diagnostics for chainlog itself.

Library: structlog. chainlog never configures structlog; the host
application's configuration decides where these records go.
"""

from __future__ import annotations

import structlog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a chainlog component."""
    return structlog.get_logger(_name=name or "chainlog")
