"""Command-line interface for s3-pager.

Commands:
    - list: Enumerate every object in a bucket, page by page

Object keys are printed to stdout as they arrive; page failures go to
stderr. Defaults for every option come from ``S3_PAGER_*`` environment
variables (see ``s3_pager.core.config``).
"""

import asyncio
from typing import Annotated, Optional

import typer

from . import __version__
from .commands import enumerate_bucket
from .core.exceptions import ConfigurationError
from .objectstorage.listing import PAGE_FAILED_EVENT, EnumerationEvent

app = typer.Typer(
    name="s3-pager",
    help="Paginated listing of objects in S3-compatible buckets.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-pager {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-Pager: enumerate bucket contents with cursor-based pagination.
    """
    pass


def _print_event(event: EnumerationEvent) -> None:
    if event.kind == PAGE_FAILED_EVENT:
        typer.echo(f"Page {event.page} failed: {event.error}", err=True)
    else:
        typer.echo(f" - {event.key}")


@app.command("list")
def list_cmd(
    bucket: Annotated[
        Optional[str],
        typer.Argument(help="Bucket to list (default: S3_PAGER_BUCKET)"),
    ] = None,
    page_size: Annotated[
        Optional[int],
        typer.Option("--page-size", min=1, help="Maximum objects per page request"),
    ] = None,
    region_name: Annotated[
        Optional[str], typer.Option("--region", help="AWS region name")
    ] = None,
    prefix: Annotated[
        str, typer.Option("--prefix", help="Only list keys under this prefix")
    ] = "",
    endpoint_url: Annotated[
        Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
    ] = None,
    aws_profile: Annotated[
        Optional[str], typer.Option("--aws-profile", help="AWS CLI profile name")
    ] = None,
    retries: Annotated[
        Optional[int],
        typer.Option("--retries", min=0, help="Extra attempts per failing page"),
    ] = None,
) -> None:
    """
    List every object in a bucket.

    Examples:
        s3-pager list my-bucket --region ap-northeast-1 --page-size 10
        s3-pager list my-bucket --endpoint-url http://localhost:9000
    """
    try:
        summary = asyncio.run(
            enumerate_bucket(
                bucket,
                page_size,
                region_name,
                prefix=prefix,
                endpoint_url=endpoint_url,
                aws_profile=aws_profile,
                reporter=_print_event,
                max_retries=retries,
            )
        )
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(2)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(summary.message)
    if not summary.ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
