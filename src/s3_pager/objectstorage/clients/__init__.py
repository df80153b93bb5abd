"""S3 endpoint resolution and client management."""

from .s3_client import (
    ClientHandle,
    ConfigProvider,
    EndpointResolver,
    EnvironmentConfigProvider,
    RegionDescriptor,
    S3ClientConfig,
    S3ClientManager,
    StaticConfigProvider,
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
]
