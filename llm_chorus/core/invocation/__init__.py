"""Concurrent provider invocation."""

from .invoker import Invoker

__all__ = ["Invoker"]
