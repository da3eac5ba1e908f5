from .adapter import GroqAdapter

__all__ = ["GroqAdapter"]
