"""src/ddnsurl/utils/__init__.py"""

from .log import get_logger

__all__ = ["get_logger"]
