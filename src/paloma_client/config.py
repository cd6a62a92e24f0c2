"""Configuration from environment variables."""
import os
from collections import namedtuple

FactoryConfig = namedtuple(
    "FactoryConfig",
    [
        "base_url",
        "api_key",
        "success_log_format",
        "error_log_format",
        "default_channel",
        "default_locale",
    ],
    defaults=(None, None, None, None),
)


def _env(name):
    """Read an environment variable, treating blank values as unset."""
    value = os.getenv(name, "").strip()
    return value or None


def load_config():
    """Build a FactoryConfig from environment variables."""
    base_url = _env("PALOMA_BASE_URL")
    if not base_url:
        raise ValueError("PALOMA_BASE_URL is required")

    api_key = _env("PALOMA_API_KEY")
    if not api_key:
        raise ValueError("PALOMA_API_KEY is required")

    return FactoryConfig(
        base_url=base_url,
        api_key=api_key,
        success_log_format=_env("PALOMA_LOG_FORMAT_SUCCESS"),
        error_log_format=_env("PALOMA_LOG_FORMAT_FAILURE"),
        default_channel=_env("PALOMA_DEFAULT_CHANNEL"),
        default_locale=_env("PALOMA_DEFAULT_LOCALE"),
    )
