"""
Structured logging utility for provider calls.

This module provides a consistent logging interface for adapters and the
invoker, ensuring structured fields like provider, model and request_id.
Values that look like credentials are masked before they reach a handler.
"""

import logging
import re
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Optional


REDACTED = "***"

_SECRET_FIELD = re.compile(r"(api[_-]?key|authorization|secret|token|password)", re.IGNORECASE)
_KEY_QUERY = re.compile(r"([?&]key=)[^&\s]+", re.IGNORECASE)


def redact(key: str, value: Any) -> Any:
    """Mask a field value if its name or content carries a secret."""
    if value is None:
        return None
    if _SECRET_FIELD.search(key) and not key.endswith("_tokens"):
        return REDACTED
    if isinstance(value, str):
        return _KEY_QUERY.sub(r"\1" + REDACTED, value)
    return value


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of outbound headers safe to log."""
    return {k: (REDACTED if _SECRET_FIELD.search(k) else v) for k, v in headers.items()}


class ProviderLogger:
    """Structured logger for provider calls."""

    def __init__(self, provider_name: str):
        """
        Initialize logger for a specific provider.

        Args:
            provider_name: Name of the provider (e.g., "anthropic", "google")
        """
        self.provider = provider_name
        self.logger = logging.getLogger(f"llm_chorus.providers.{provider_name}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"provider={self.provider}"]

        for key, value in kwargs.items():
            value = redact(key, value)
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        self.logger.debug(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def info(self, message: str, model: Optional[str] = None,
             request_id: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def warning(self, message: str, model: Optional[str] = None,
                request_id: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def error(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None):
        """
        Context manager to track request timing and log key events.

        Args:
            method: The operation being performed (e.g., "chat", "probe")
            model: The model being used
            request_id: Optional request ID (generated if not provided)

        Yields:
            Dict with request metadata including request_id. Callers may set
            `status` on it; it is logged on completion.
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()

        self.debug(
            f"Starting {method} request",
            model=model,
            request_id=request_id,
            method=method
        )

        metadata = {
            'request_id': request_id,
            'model': model,
            'method': method,
            'start_time': start_time,
            'status': None,
        }

        try:
            yield metadata

            duration = time.time() - start_time
            self.info(
                f"Completed {method} request",
                model=model,
                request_id=request_id,
                method=method,
                status=metadata['status'],
                duration_ms=int(duration * 1000)
            )

        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {method} request",
                model=model,
                request_id=request_id,
                method=method,
                duration_ms=int(duration * 1000),
                error=e
            )
            raise
