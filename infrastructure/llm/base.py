"""Re-export of the analysis client interface for infrastructure bindings."""

from domain.services.analysis_client import AnalysisClient

__all__ = ["AnalysisClient"]
