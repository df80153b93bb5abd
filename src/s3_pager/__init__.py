"""Paginated enumeration of objects in S3-compatible buckets.

This package lists every object in a bucket using cursor-based pagination
(``ListObjectsV2`` with a bounded page size), reporting each object and each
failed page as it happens and returning a completion message at the end.

Key Features:
    - Region/endpoint resolution from ambient AWS configuration
    - Strictly sequential, bounded-size page requests
    - Per-object and per-failure event reporting
    - Asynchronous entry points for host applications
    - CLI interface

Recommended Usage:

    >>> import asyncio
    >>> from s3_pager import list_objects
    >>> message = asyncio.run(list_objects("my-bucket", page_size=10))

Advanced Usage:

    >>> from s3_pager.objectstorage import EndpointResolver, S3ObjectEnumerator
    >>> handle = EndpointResolver().resolve("ap-northeast-1")
    >>> summary = asyncio.run(S3ObjectEnumerator(handle.client, "my-bucket").run())
"""

__version__ = "0.1.0"

from .commands import enumerate_bucket, list_objects
from .core.exceptions import ConfigurationError, S3PagerError, ValidationError
from .objectstorage import (
    ClientHandle,
    ConfigProvider,
    EndpointResolver,
    EnumerationEvent,
    EnumerationSummary,
    EnvironmentConfigProvider,
    ObjectRecord,
    PageResult,
    RegionDescriptor,
    S3ClientConfig,
    S3ObjectEnumerator,
    StaticConfigProvider,
)

__all__ = [
    # Entry points
    "enumerate_bucket",
    "list_objects",
    # Errors
    "ConfigurationError",
    "S3PagerError",
    "ValidationError",
    # Endpoint resolution
    "ClientHandle",
    "ConfigProvider",
    "EndpointResolver",
    "EnvironmentConfigProvider",
    "RegionDescriptor",
    "S3ClientConfig",
    "StaticConfigProvider",
    # Enumeration
    "EnumerationEvent",
    "EnumerationSummary",
    "ObjectRecord",
    "PageResult",
    "S3ObjectEnumerator",
]
