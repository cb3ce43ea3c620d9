"""Domain service interface definitions."""

from .analysis_client import AnalysisClient
from .clipboard import Clipboard

__all__ = [
    "AnalysisClient",
    "Clipboard",
]
