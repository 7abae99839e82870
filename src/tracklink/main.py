"""
Tracklink - recording suggestions for release track listings
Main entry point for the application.
"""

from .core import setup_logging, get_logger
from .core.validation import validate_and_raise
from .ui.cli import TracklinkCLI

logger = get_logger(__name__)


def main():
    """Main entry point."""
    setup_logging()
    logger.debug("Starting Tracklink")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise
        
        cli = TracklinkCLI()
        cli.run()
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    main()
