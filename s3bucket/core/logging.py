"""Logging configuration."""

import logging
import os


def setup_logging() -> None:
    """Configure logging for host programs and scripts."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # botocore is chatty at DEBUG; keep it one notch quieter than us
    if level == "DEBUG":
        logging.getLogger("botocore").setLevel(logging.INFO)
