"""Object storage operations for S3-compatible services."""

from .clients import (
    ClientHandle,
    ConfigProvider,
    EndpointResolver,
    EnvironmentConfigProvider,
    RegionDescriptor,
    S3ClientConfig,
    S3ClientManager,
    StaticConfigProvider,
)
from .listing import (
    EnumerationEvent,
    EnumerationSummary,
    ObjectRecord,
    PageResult,
    S3ObjectEnumerator,
)

__all__ = [
    "ClientHandle",
    "ConfigProvider",
    "EndpointResolver",
    "EnvironmentConfigProvider",
    "RegionDescriptor",
    "S3ClientConfig",
    "S3ClientManager",
    "StaticConfigProvider",
    "EnumerationEvent",
    "EnumerationSummary",
    "ObjectRecord",
    "PageResult",
    "S3ObjectEnumerator",
]
