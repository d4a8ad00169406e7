"""gitglean: typed interpretation of git's textual output."""

from loguru import logger

__version__ = "0.1.0"

# Silent as a library until configure_logging() or logger.enable("gitglean").
logger.disable("gitglean")
