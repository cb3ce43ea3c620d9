"""Application factory for creating fully wired controllers and services."""

from __future__ import annotations

from typing import Optional

from infrastructure.config import SystemConfig, get_config


def _bind_services(config: SystemConfig, model_name: Optional[str] = None):
    """Instantiate and bind service implementations."""
    from infrastructure.clipboard import SystemClipboard
    from infrastructure.llm.gemini import GeminiAnalysisClient

    api_config = config.api_configurations
    analysis_client = GeminiAnalysisClient(
        api_key=api_config.gemini_api_key,
        model_name=model_name or api_config.model_name,
        temperature=api_config.temperature,
        max_output_tokens=api_config.max_output_tokens,
    )

    return {
        "analysis_client": analysis_client,
        "clipboard": SystemClipboard(),
    }


def create_session_controller(
    config: Optional[SystemConfig] = None, model_name: Optional[str] = None
):
    """Create a fully wired :class:`SessionController`."""
    config = config or get_config()
    services = _bind_services(config, model_name=model_name)

    from application.controllers import SessionController

    return SessionController(
        client=services["analysis_client"],
        clipboard=services["clipboard"],
        history_limit=config.session_settings.history_limit,
    )
