"""Tests for the command-line interface."""

from typer.testing import CliRunner

from s3_pager import __version__
from s3_pager.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"s3-pager {__version__}" in result.stdout


def test_list_prints_keys_and_summary(s3):
    for name in ("a.txt", "b.txt", "c.txt"):
        s3.put_object(Bucket="test-bucket", Key=name, Body=b"content")

    result = runner.invoke(
        app, ["list", "test-bucket", "--region", "us-east-1", "--page-size", "2"]
    )

    assert result.exit_code == 0
    assert " - a.txt\n - b.txt\n - c.txt\n" in result.stdout
    assert "Listed 3 objects from bucket 'test-bucket' in 2 page(s)" in result.stdout


def test_list_missing_bucket_exits_nonzero(s3):
    result = runner.invoke(app, ["list", "missing-bucket", "--region", "us-east-1"])

    assert result.exit_code == 1
    assert "Page 1 failed" in result.output


def test_list_without_credentials(isolated_aws_env):
    result = runner.invoke(app, ["list", "test-bucket", "--region", "us-east-1"])

    assert result.exit_code == 2
    assert "Configuration error" in result.output


def test_list_rejects_zero_page_size():
    result = runner.invoke(app, ["list", "test-bucket", "--page-size", "0"])

    assert result.exit_code != 0
