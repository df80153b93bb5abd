"""Object storage listing operations."""

from .bucket_pages import (
    DEFAULT_PAGE_SIZE,
    OBJECT_EVENT,
    PAGE_FAILED_EVENT,
    UNKNOWN_KEY,
    EnumerationEvent,
    EnumerationSummary,
    EventReporter,
    ObjectRecord,
    PageResult,
    S3ObjectEnumerator,
    validate_listing_params,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "OBJECT_EVENT",
    "PAGE_FAILED_EVENT",
    "UNKNOWN_KEY",
    "EnumerationEvent",
    "EnumerationSummary",
    "EventReporter",
    "ObjectRecord",
    "PageResult",
    "S3ObjectEnumerator",
    "validate_listing_params",
]
