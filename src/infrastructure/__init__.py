"""
Infrastructure helpers shared by the core modules.
"""

from src.infrastructure.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
