"""Generate pytest smoke tests from an OpenAPI document."""

__version__ = "0.1.0"
