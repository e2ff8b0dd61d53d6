"""Secret-backed API key authorization and secret rotation for AWS Lambda."""

__version__ = "0.1.0"
