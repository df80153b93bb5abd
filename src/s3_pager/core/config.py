"""Configuration management for s3-pager."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "s3-pager"
    log_format: str = "json"

    # Listing defaults used when the caller supplies nothing
    region_name: str = "ap-northeast-1"
    bucket: str = "t-toda.test.bucket"
    page_size: int = 10
    endpoint_url: Optional[str] = None
    aws_profile: Optional[str] = None
    max_retries: int = 0
    retry_delay: float = 0.5

    model_config = {
        "env_prefix": "S3_PAGER_",
        "case_sensitive": False,
    }


settings = Settings()
