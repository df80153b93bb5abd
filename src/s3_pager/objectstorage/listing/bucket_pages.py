"""Paginated enumeration of the objects stored in an S3 bucket.

Pages are fetched strictly one after another with ``list_objects_v2``: each
request carries the continuation token returned by the previous response,
so there is never more than one request in flight per enumeration. The
blocking boto3 call runs in a worker thread to keep the caller's event loop
free.

A page that fails is reported as data (a ``PageResult`` with ``error`` set)
rather than raised. Since a failed response carries no continuation token,
enumeration stops after reporting it.
"""

import asyncio
from contextlib import aclosing
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, AsyncIterator, Callable, Literal, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3_pager.core import get_logger, get_tracer
from s3_pager.core.exceptions import ValidationError

logger = get_logger(__name__)
tracer = get_tracer(__name__)

DEFAULT_PAGE_SIZE = 10
UNKNOWN_KEY = "unknown"

OBJECT_EVENT = "object"
PAGE_FAILED_EVENT = "page_failed"


@dataclass(frozen=True)
class ObjectRecord:
    """One entry of a bucket listing."""

    key: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    storage_class: Optional[str] = None

    @classmethod
    def from_response(cls, entry: Any) -> "ObjectRecord":
        """Build a record from a ``Contents`` entry, tolerating bad data."""
        if not isinstance(entry, dict):
            return cls(key=UNKNOWN_KEY)

        key = entry.get("Key")
        if not isinstance(key, str) or not key:
            key = UNKNOWN_KEY

        size = entry.get("Size")
        return cls(
            key=key,
            size=size if isinstance(size, int) else None,
            last_modified=entry.get("LastModified"),
            etag=entry.get("ETag"),
            storage_class=entry.get("StorageClass"),
        )


@dataclass(frozen=True)
class PageResult:
    """Outcome of a single page request."""

    number: int
    request_cursor: Optional[str] = None
    objects: tuple[ObjectRecord, ...] = ()
    next_cursor: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def keys(self) -> list[str]:
        return [record.key for record in self.objects]


@dataclass(frozen=True)
class EnumerationEvent:
    """A reportable event: one listed object or one failed page."""

    kind: Literal["object", "page_failed"]
    bucket: str
    page: int
    key: Optional[str] = None
    error: Optional[str] = None


EventReporter = Callable[[EnumerationEvent], None]


@dataclass
class EnumerationSummary:
    """Totals for a finished enumeration."""

    bucket: str
    pages: int = 0
    object_count: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def failed_pages(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def message(self) -> str:
        """Human-readable completion message."""
        message = (
            f"Listed {self.object_count} objects from bucket '{self.bucket}' "
            f"in {self.pages} page(s)"
        )
        if self.failures:
            message += f"; {self.failed_pages} page request(s) failed"
        return message


def validate_listing_params(bucket: str, page_size: int, max_retries: int = 0) -> None:
    """Reject an empty bucket, a non-positive page size or negative retries."""
    if not bucket:
        raise ValidationError("Bucket name must not be empty")
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValidationError(f"Page size must be an integer, got: {page_size!r}")
    if page_size < 1:
        raise ValidationError(f"Page size must be at least 1, got: {page_size}")
    if max_retries < 0:
        raise ValidationError(f"max_retries must not be negative: {max_retries}")


class S3ObjectEnumerator:
    """Enumerates every object in a bucket, one bounded page at a time."""

    def __init__(
        self,
        client: Any,
        bucket: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        prefix: str = "",
        max_retries: int = 0,
        retry_delay: float = 0.0,
    ):
        """Initialize the enumerator.

        Args:
            client: boto3 S3 client (or anything with ``list_objects_v2``)
            bucket: Bucket to enumerate
            page_size: Maximum number of objects per page request
            prefix: Only list keys starting with this prefix
            max_retries: Extra attempts for a failing page request
            retry_delay: Seconds to wait between attempts

        Raises:
            ValidationError: If bucket, page size or retry settings are invalid
        """
        validate_listing_params(bucket, page_size, max_retries)

        self.client = client
        self.bucket = bucket
        self.page_size = page_size
        self.prefix = prefix
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    async def pages(self) -> AsyncIterator[PageResult]:
        """Yield each page in request order until the listing is exhausted."""
        cursor: Optional[str] = None
        number = 1

        while True:
            try:
                response = await self._fetch(number, cursor)
            except (ClientError, BotoCoreError) as e:
                yield PageResult(number=number, request_cursor=cursor, error=str(e))
                return

            contents = response.get("Contents")
            if not isinstance(contents, list):
                contents = []
            page = PageResult(
                number=number,
                request_cursor=cursor,
                objects=tuple(ObjectRecord.from_response(entry) for entry in contents),
                next_cursor=response.get("NextContinuationToken") or None,
            )
            logger.debug(
                "S3 page fetched",
                bucket=self.bucket,
                page=number,
                object_count=len(page.objects),
                has_more=page.next_cursor is not None,
            )
            yield page

            if page.next_cursor is None:
                return
            cursor = page.next_cursor
            number += 1

    async def run(self, reporter: Optional[EventReporter] = None) -> EnumerationSummary:
        """Enumerate the bucket, reporting every object and failed page.

        Args:
            reporter: Called once per event, in order

        Returns:
            Summary of the enumeration
        """
        summary = EnumerationSummary(bucket=self.bucket)
        logger.info(
            "Enumerating S3 objects",
            bucket=self.bucket,
            prefix=self.prefix,
            page_size=self.page_size,
        )

        try:
            async with aclosing(self.pages()) as pages:
                async for page in pages:
                    summary.pages += 1

                    if not page.ok:
                        summary.failures.append(page.error)
                        self._emit(
                            EnumerationEvent(
                                kind=PAGE_FAILED_EVENT,
                                bucket=self.bucket,
                                page=page.number,
                                error=page.error,
                            ),
                            reporter,
                        )
                        continue

                    for record in page.objects:
                        summary.object_count += 1
                        self._emit(
                            EnumerationEvent(
                                kind=OBJECT_EVENT,
                                bucket=self.bucket,
                                page=page.number,
                                key=record.key,
                            ),
                            reporter,
                        )
        except asyncio.CancelledError:
            logger.info(
                "S3 enumeration cancelled", bucket=self.bucket, pages=summary.pages
            )
            raise

        logger.info(
            "S3 enumeration completed",
            bucket=self.bucket,
            pages=summary.pages,
            object_count=summary.object_count,
            failed_pages=summary.failed_pages,
        )
        return summary

    async def _fetch(self, number: int, cursor: Optional[str]) -> dict[str, Any]:
        params: dict[str, Any] = {"Bucket": self.bucket, "MaxKeys": self.page_size}
        if self.prefix:
            params["Prefix"] = self.prefix
        if cursor is not None:
            params["ContinuationToken"] = cursor

        attempt = 0
        while True:
            try:
                return await self._request(number, params)
            except (ClientError, BotoCoreError) as e:
                if attempt >= self.max_retries:
                    raise
                attempt += 1
                logger.warning(
                    "Retrying S3 page request",
                    bucket=self.bucket,
                    page=number,
                    attempt=attempt,
                    error=str(e),
                )
                await asyncio.sleep(self.retry_delay)

    async def _request(self, number: int, params: dict[str, Any]) -> dict[str, Any]:
        with tracer.start_as_current_span("s3.list_objects_v2") as span:
            span.set_attribute("s3.bucket", self.bucket)
            span.set_attribute("s3.page", number)
            span.set_attribute("s3.max_keys", self.page_size)
            return await asyncio.to_thread(self.client.list_objects_v2, **params)

    def _emit(
        self, event: EnumerationEvent, reporter: Optional[EventReporter]
    ) -> None:
        if event.kind == PAGE_FAILED_EVENT:
            logger.warning(
                "S3 page request failed",
                bucket=event.bucket,
                page=event.page,
                error=event.error,
            )
        else:
            logger.debug(
                "S3 object listed", bucket=event.bucket, page=event.page, key=event.key
            )

        if reporter is not None:
            reporter(event)
