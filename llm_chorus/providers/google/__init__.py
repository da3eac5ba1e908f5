from .adapter import GoogleAdapter

__all__ = ["GoogleAdapter"]
