"""
Environment-based configuration.

Credentials and connection settings come from process environment variables,
falling back to a .env file. The process environment always wins.
"""

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..utilities.constants import DEFAULT_REST_HOST, DEFAULT_TIMEOUT, ValidationError

logger = logging.getLogger(__name__)

ENV_API_KEY = "BFX_API_KEY"
ENV_API_SECRET = "BFX_API_SECRET"
ENV_REST_HOST = "BFX_REST_HOST"
ENV_TIMEOUT = "BFX_TIMEOUT"

DEFAULT_ENV_FILE = ".env"


@dataclass(frozen=True)
class WalletKitConfig:
    """Connection settings for the wallet kit."""

    api_key: str | None = None
    api_secret: str | None = field(default=None, repr=False)
    rest_host: str = DEFAULT_REST_HOST
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValidationError(f"timeout must be a positive finite number, got {self.timeout}")
        if not self.rest_host:
            raise ValidationError("rest_host cannot be empty")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)


def read_env_file(path: str | Path) -> dict[str, str]:
    """
    Parse KEY=VALUE lines from a .env file.

    Blank lines and lines starting with '#' are skipped; surrounding quotes
    are stripped from values. A missing file yields an empty mapping.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}

    values: dict[str, str] = {}
    with env_path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            if key.startswith("export "):
                key = key[len("export ") :].strip()
            values[key] = value.strip().strip('"').strip("'")

    logger.debug(f"Loaded {len(values)} settings from {env_path}")
    return values


def load_config(
    env_file: str | Path | None = DEFAULT_ENV_FILE,
    environ: Mapping[str, str] | None = None,
) -> WalletKitConfig:
    """
    Build configuration from the environment and an optional .env file.

    Args:
        env_file: Path of the .env fallback, or None to skip it
        environ: Environment mapping (defaults to os.environ)

    Returns:
        WalletKitConfig. Credentials may be None; the request factory
        reports missing credentials when a request is built.
    """
    environ = os.environ if environ is None else environ
    file_values = read_env_file(env_file) if env_file is not None else {}

    def lookup(name: str) -> str | None:
        return environ.get(name) or file_values.get(name) or None

    timeout_value = lookup(ENV_TIMEOUT)
    try:
        timeout = float(timeout_value) if timeout_value else DEFAULT_TIMEOUT
    except ValueError as e:
        raise ValidationError(f"{ENV_TIMEOUT} must be a number, got {timeout_value!r}") from e

    config = WalletKitConfig(
        api_key=lookup(ENV_API_KEY),
        api_secret=lookup(ENV_API_SECRET),
        rest_host=lookup(ENV_REST_HOST) or DEFAULT_REST_HOST,
        timeout=timeout,
    )
    if not config.has_credentials:
        logger.debug("No API credentials found in environment or .env file")
    return config
