"""LLM infrastructure bindings."""

from .base import AnalysisClient
from .gemini import GeminiAnalysisClient

__all__ = ["AnalysisClient", "GeminiAnalysisClient"]
