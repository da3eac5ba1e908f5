"""Observability helpers: structured, redacted provider logging."""

from .logging import REDACTED, ProviderLogger, redact, redact_headers

__all__ = [
    "REDACTED",
    "ProviderLogger",
    "redact",
    "redact_headers",
]
