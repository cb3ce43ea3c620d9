"""Main entry point for the DevMind agent."""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from interface.cli.main import main as cli_main  # noqa: E402
from infrastructure.config import get_config  # noqa: E402
from infrastructure.logging import get_logger, setup_logging  # noqa: E402
from tracing import setup_otel_tracing  # noqa: E402

logger = get_logger(__name__)


def check_environment(config) -> None:
    """Check that the Gemini credential is available, or explain how to set it."""
    if config.api_configurations.gemini_api_key:
        print("✅ Environment check passed")
        return

    print("❌ Missing required environment variable:")
    print("   - GEMINI_API_KEY")
    print("\n📝 Setup Instructions:")
    print("1. Create a .env file in the project root")
    print("2. Add your Gemini API key:")
    print("   GEMINI_API_KEY=your_api_key_here")
    print("   (or set GEMINI_SECRET_NAME to read it from AWS Secrets Manager)")
    print("\n🔗 Get your Gemini API key from: https://aistudio.google.com/app/apikey")
    sys.exit(1)


def main() -> None:
    """Main entry point."""
    try:
        config = get_config()
        setup_logging(config.logging_settings, force=True)
        setup_otel_tracing()
        check_environment(config)
        cli_main()

    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"❌ Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
