"""Public client API."""

from .client import ChorusClient

__all__ = ["ChorusClient"]
