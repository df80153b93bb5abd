"""Asynchronous commands exposed to a host application.

These are the entry points a host shell (a desktop app command, a web
handler, the CLI) awaits. Every parameter is optional and falls back to
``s3_pager.core.settings``, so ``await list_objects()`` lists the
configured bucket with the configured page size.

Each call resolves its own client and cursor chain; concurrent calls share
no state.
"""

import asyncio
from typing import Optional

from s3_pager.core import get_logger, settings
from s3_pager.core.exceptions import ValidationError
from s3_pager.objectstorage.clients import (
    ConfigProvider,
    EndpointResolver,
    EnvironmentConfigProvider,
)
from s3_pager.objectstorage.listing import (
    EnumerationSummary,
    EventReporter,
    S3ObjectEnumerator,
    validate_listing_params,
)

logger = get_logger(__name__)


async def enumerate_bucket(
    bucket: Optional[str] = None,
    page_size: Optional[int] = None,
    region_name: Optional[str] = None,
    *,
    prefix: str = "",
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
    provider: Optional[ConfigProvider] = None,
    reporter: Optional[EventReporter] = None,
    max_retries: Optional[int] = None,
) -> EnumerationSummary:
    """
    Enumerate every object in a bucket and return the structured summary.

    Only ``None`` falls back to settings. An empty ``endpoint_url`` or
    ``aws_profile`` means "none"; an empty bucket or region is rejected.
    With an explicit ``provider``, ``region_name`` and ``endpoint_url`` are
    applied on top of its configuration and ``aws_profile`` is ignored.

    Args:
        bucket: Bucket to enumerate (default: settings.bucket)
        page_size: Objects per page request (default: settings.page_size)
        region_name: Preferred region (default: settings.region_name)
        prefix: Only list keys under this prefix
        endpoint_url: Custom endpoint for S3-compatible services
        aws_profile: AWS CLI profile used for ambient resolution
        provider: Configuration provider; replaces ambient resolution
        reporter: Receives one event per object and per failed page
        max_retries: Extra attempts per failing page (default: settings)

    Returns:
        EnumerationSummary including any page failures

    Raises:
        ConfigurationError: If credentials or region cannot be resolved
        ValidationError: If bucket, region or page size are invalid
    """
    if bucket is None:
        bucket = settings.bucket
    if page_size is None:
        page_size = settings.page_size
    if region_name is None:
        region_name = settings.region_name
    if max_retries is None:
        max_retries = settings.max_retries

    validate_listing_params(bucket, page_size, max_retries)
    if not region_name:
        raise ValidationError("Region name must not be empty")

    if provider is None:
        if endpoint_url is None:
            endpoint_url = settings.endpoint_url
        if aws_profile is None:
            aws_profile = settings.aws_profile
        provider = EnvironmentConfigProvider(
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )

    logger.info("Listing bucket objects", bucket=bucket, region=region_name)

    resolver = EndpointResolver(provider)
    handle = await asyncio.to_thread(resolver.resolve, region_name, endpoint_url)

    enumerator = S3ObjectEnumerator(
        handle.client,
        bucket,
        page_size=page_size,
        prefix=prefix,
        max_retries=max_retries,
        retry_delay=settings.retry_delay,
    )
    return await enumerator.run(reporter=reporter)


async def list_objects(
    bucket: Optional[str] = None,
    page_size: Optional[int] = None,
    region_name: Optional[str] = None,
    *,
    prefix: str = "",
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
    provider: Optional[ConfigProvider] = None,
    reporter: Optional[EventReporter] = None,
    max_retries: Optional[int] = None,
) -> str:
    """Enumerate a bucket and return the completion message."""
    summary = await enumerate_bucket(
        bucket,
        page_size,
        region_name,
        prefix=prefix,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
        provider=provider,
        reporter=reporter,
        max_retries=max_retries,
    )
    return summary.message
