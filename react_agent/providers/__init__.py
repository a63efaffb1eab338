"""LLM providers."""

from .base import BaseLLMProvider, RetryConfig
from .openai import OpenAIProvider

__all__ = ["BaseLLMProvider", "RetryConfig", "OpenAIProvider"]
