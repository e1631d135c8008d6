import os
from pathlib import Path

from webdata.common.core.logging_config import setup_logging as common_setup_logging

from ..config import config

DEFAULT_LOG_CONFIG_PATH = Path(__file__).with_name("logging.yml")


def setup_logging():
    """
    Load the YAML config and initialize logging.
    LOG_CONFIG_PATH (environment first, then settings) overrides the bundled file;
    the configured LOG_LEVEL is the fallback level.
    """
    config_path = os.getenv("LOG_CONFIG_PATH") or config.LOG_CONFIG_PATH
    common_setup_logging(config_path or str(DEFAULT_LOG_CONFIG_PATH), default_level=config.LOG_LEVEL)
