"""
Normalizer configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pydantic import Field
from webdata.common.core.config import BaseAppConfig


class NormalizerConfig(BaseAppConfig):
    """
    Configuration management for the Request Normalizer.
    """

    # Body decoding
    XML_DECODING_ENABLED: bool = Field(
        default=True, description="Decode application/xml bodies instead of keeping raw bytes"
    )

    # Logging
    LOG_CONFIG_PATH: str = Field(
        default="", description="Logging YAML path (empty uses the bundled logging.yml)"
    )

    # Update check (maintenance task, never part of request parsing)
    UPDATE_CHECK_ENABLED: bool = Field(default=False, description="Whether to run the update check")
    UPDATE_CHECK_URL: str = Field(
        default="", description="URL of the reference copy to compare the local file against"
    )
    UPDATE_CHECK_TIMEOUT: float = Field(default=5.0, description="Fetch timeout (seconds)")
    UPDATE_CHECK_LOCAL_PATH: str = Field(
        default="", description="Local file to hash (empty uses the normalizer module)"
    )


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = NormalizerConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
