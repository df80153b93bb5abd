"""Core utilities and shared components for s3-pager."""

from .config import settings
from .exceptions import ConfigurationError, S3PagerError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "S3PagerError",
    "ConfigurationError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
