"""Test configuration and fixtures for s3-pager."""

import os

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from s3_pager.objectstorage.clients import S3ClientConfig, StaticConfigProvider


class FakeS3Client:
    """Scripted stand-in for a boto3 S3 client.

    Responses queued in ``responses`` (dicts or exceptions) are served first.
    After that, pages are cut from ``keys`` honoring MaxKeys and
    ContinuationToken like S3 does.
    """

    def __init__(self, keys=None, responses=None, bucket=None):
        self.keys = list(keys or [])
        self.responses = list(responses or [])
        self.bucket = bucket
        self.calls = []

    def list_objects_v2(self, **kwargs):
        self.calls.append(dict(kwargs))

        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response

        token = kwargs.get("ContinuationToken")
        start = int(token.rsplit("-", 1)[1]) if token else 0
        end = start + kwargs["MaxKeys"]
        page = self.keys[start:end]

        response = {"KeyCount": len(page), "IsTruncated": end < len(self.keys)}
        if page:
            response["Contents"] = [{"Key": key, "Size": len(key)} for key in page]
        if end < len(self.keys):
            response["NextContinuationToken"] = f"{self.bucket or 'token'}-{end}"
        return response


def client_error(code="AccessDenied", message="Access Denied"):
    """Build a ClientError as boto3 raises it for ListObjectsV2."""
    return ClientError({"Error": {"Code": code, "Message": message}}, "ListObjectsV2")


@pytest.fixture
def fake_s3_client():
    """Factory for scripted S3 clients."""
    return FakeS3Client


@pytest.fixture
def make_client_error():
    """Factory for ClientError instances."""
    return client_error


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def isolated_aws_env(monkeypatch, tmp_path):
    """Environment where no AWS credentials or region can be found."""
    for name in list(os.environ):
        if name.startswith("AWS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")


@pytest.fixture
def s3(aws_credentials):
    """Mocked S3 with an empty ``test-bucket``."""
    with mock_aws():
        client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        client.create_bucket(Bucket="test-bucket")
        yield client


@pytest.fixture
def static_provider():
    """Provider with explicit test credentials in us-east-1."""
    return StaticConfigProvider(
        S3ClientConfig(
            access_key_id="test_key",
            secret_access_key="test_secret",
            region_name="us-east-1",
        )
    )
