"""Request and response normalization."""

from .request import (
    PROVIDER_FIELDS,
    normalize_messages,
    normalize_options,
    normalize_request,
    select_providers,
)
from .response import ResponseNormalizer

__all__ = [
    "PROVIDER_FIELDS",
    "normalize_messages",
    "normalize_options",
    "normalize_request",
    "select_providers",
    "ResponseNormalizer",
]
