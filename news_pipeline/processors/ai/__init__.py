"""AI summarization backends (OpenAI, Anthropic, Gemini) and selection."""

from .base import ProviderError, Summarizer
from .factory import create_summarizer

__all__ = ["ProviderError", "Summarizer", "create_summarizer"]
