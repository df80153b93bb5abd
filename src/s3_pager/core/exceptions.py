"""Exception hierarchy for s3-pager."""


class S3PagerError(Exception):
    """Base exception for all s3-pager errors."""

    pass


class ValidationError(S3PagerError):
    """Raised when validation fails."""

    pass


class ConfigurationError(S3PagerError):
    """Raised when credentials or region cannot be resolved."""

    pass
