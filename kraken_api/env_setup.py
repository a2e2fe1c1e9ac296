"""Environment configuration setup utilities.

This module provides functions for loading Kraken credentials and endpoint
settings from a .env file or from the process environment.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from kraken_api.errors import ValidationError
from kraken_api.helpers import DEFAULT_API_URL

log = logging.getLogger(__name__)


def setup_environment() -> tuple[str, str | None, str | None, float | None]:
    """Load and return environment variables for Kraken API configuration.

    Loads environment variables from a .env file if present, otherwise falls
    back to system environment variables. Reads environment-specific variables
    based on the ENVIRONMENT variable (defaults to 'production').

    Returns:
        Tuple:
            - api_endpoint: The versioned API base URL; its path (e.g. ``/0``)
              is part of every private-call signature
            - api_key: The account API key, or None if unset
            - api_secret: The base64 account secret, or None if unset
            - timeout: Request timeout in seconds, or None for no timeout

    Raises:
        ValidationError: If the configured timeout is not a positive number

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to Bash Environment variables.")

    environment = os.getenv("ENVIRONMENT", "production").lower()
    log.info("Using %s environment", environment)
    suffix = environment.upper()

    api_endpoint = os.environ.get(f"KRAKEN_API_ENDPOINT_{suffix}", DEFAULT_API_URL)
    api_key = os.environ.get(f"KRAKEN_API_KEY_{suffix}")
    api_secret = os.environ.get(f"KRAKEN_API_SECRET_{suffix}")

    raw_timeout = os.environ.get(f"KRAKEN_HTTP_TIMEOUT_{suffix}")
    timeout: float | None = None
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValidationError(f"Invalid KRAKEN_HTTP_TIMEOUT_{suffix}: {e}") from e
        if timeout <= 0:
            raise ValidationError(
                f"Invalid KRAKEN_HTTP_TIMEOUT_{suffix}: must be positive, got {timeout}"
            )

    return (api_endpoint, api_key, api_secret, timeout)
