"""
Monitoring and observability infrastructure.
"""

from notaire.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_logger,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "get_logger",
    "setup_logging",
]
