from .adapter import AnthropicAdapter

__all__ = ["AnthropicAdapter"]
