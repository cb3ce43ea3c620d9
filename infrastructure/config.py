"""Configuration management for the DevMind agent."""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from domain.entities import DEFAULT_HISTORY_LIMIT

from .secret_manager import get_env_or_secret

# Load environment variables from a local .env file if present
load_dotenv()

# Centralized constants
DEFAULT_MODEL_NAME = "gemini-3-flash-preview"


class AppConfig(BaseModel):
    """Application configuration settings."""
    gemini_api_key: Optional[str] = Field(default=None, description="Google Gemini API key")
    model_name: str = Field(default=DEFAULT_MODEL_NAME, description="Gemini model used for analysis")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0, description="Sampling temperature")
    max_output_tokens: int = Field(default=8192, gt=0, description="Maximum tokens in a response")

    # LangSmith configuration
    langsmith_api_key: Optional[str] = Field(default=None, description="LangSmith API key")
    langsmith_project: str = Field(default="devmind-agent", description="LangSmith project name")
    langsmith_endpoint: str = Field(default="https://api.smith.langchain.com", description="LangSmith API endpoint")
    enable_tracing: bool = Field(default=True, description="Enable LangSmith tracing")


class SessionConfig(BaseModel):
    """Interactive session settings."""
    history_limit: int = Field(default=DEFAULT_HISTORY_LIMIT, ge=1, description="Maximum analyses kept in history")


class LoggingConfig(BaseModel):
    """Logging configuration settings."""
    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: str = Field(default="logs/devmind.log", description="Main log file path")
    console_output: bool = Field(default=False, description="Enable console output")
    file_output: bool = Field(default=True, description="Enable file output")
    json_format: bool = Field(default=False, description="Emit one JSON object per log line")


class SystemConfig(BaseModel):
    """Main system configuration."""
    api_configurations: AppConfig = Field(default_factory=AppConfig)
    session_settings: SessionConfig = Field(default_factory=SessionConfig)
    logging_settings: LoggingConfig = Field(default_factory=LoggingConfig)
    environment: str = Field(default_factory=lambda: os.getenv("APP_ENV", "development"), description="Deployment environment")

    def __init__(self, **kwargs):
        # Load API configurations from environment variables
        api_config = kwargs.get('api_configurations', {})
        if not isinstance(api_config, dict):
            api_config = api_config.model_dump()

        api_config.setdefault(
            'gemini_api_key',
            get_env_or_secret('GEMINI_API_KEY', 'GEMINI_SECRET_NAME') or os.getenv('GOOGLE_API_KEY'),
        )
        api_config.setdefault('model_name', os.getenv('GEMINI_MODEL', DEFAULT_MODEL_NAME))
        if os.getenv('GEMINI_TEMPERATURE'):
            api_config.setdefault('temperature', float(os.environ['GEMINI_TEMPERATURE']))
        api_config.setdefault('langsmith_api_key', get_env_or_secret('LANGCHAIN_API_KEY', 'LANGCHAIN_SECRET_NAME'))
        api_config.setdefault('langsmith_project', os.getenv('LANGCHAIN_PROJECT', 'devmind-agent'))
        api_config.setdefault('enable_tracing', os.getenv('LANGCHAIN_TRACING_V2', 'true').lower() == 'true')
        kwargs['api_configurations'] = AppConfig(**api_config)

        session_config = kwargs.get('session_settings', {})
        if not isinstance(session_config, dict):
            session_config = session_config.model_dump()
        if os.getenv('DEVMIND_HISTORY_LIMIT'):
            session_config.setdefault('history_limit', int(os.environ['DEVMIND_HISTORY_LIMIT']))
        kwargs['session_settings'] = SessionConfig(**session_config)

        super().__init__(**kwargs)


class DevelopmentConfig(SystemConfig):
    """Configuration for development environment."""


class ProductionConfig(SystemConfig):
    """Configuration for production environment."""


_CONFIG_MAP = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}


def get_config(environment: Optional[str] = None) -> SystemConfig:
    """Load configuration based on the deployment environment."""
    env = (environment or os.getenv("APP_ENV", "development")).lower()
    config_cls = _CONFIG_MAP.get(env, DevelopmentConfig)
    return config_cls(environment=env)
