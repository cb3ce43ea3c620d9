"""Entry point for the DevMind CLI."""

from typing import Optional

import click

from app_factory import create_session_controller
from infrastructure.config import get_config
from infrastructure.logging import get_logger, setup_logging

from .interface import DevMindCLI

logger = get_logger(__name__)


@click.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--model", "model_name", help="Gemini model to use for analysis")
def main(debug: bool, model_name: Optional[str]) -> None:
    """DevMind: turn a situation into the right engineering deliverable."""
    config = get_config()
    if debug:
        setup_logging(config.logging_settings, debug=True, force=True)

    logger.info(f"Starting CLI interface (debug={debug}, model={model_name or 'default'})")
    controller = create_session_controller(config, model_name=model_name)
    cli = DevMindCLI(controller)
    cli.start_interactive_session()


if __name__ == "__main__":
    main()
