"""
UpdateChecker - Compares the local normalizer source with a reference copy

Fetches the reference copy over HTTPS, hashes both with SHA-256 and logs a
warning when they differ or the fetch fails. Runs on demand only; request
normalization never calls it.
"""

import hashlib
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import httpx

from webdata.common.core.http_client import HttpClientFactory

from ..config import NormalizerConfig
from ..config import config as default_config
from ..core import normalizer

logger = logging.getLogger("normalizer.update_check")


class UpdateCheckStatus(str, Enum):
    DISABLED = "disabled"
    UP_TO_DATE = "up_to_date"
    DIFFERS = "differs"
    FETCH_FAILED = "fetch_failed"
    LOCAL_UNREADABLE = "local_unreadable"


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


class UpdateChecker:
    """
    One-shot update check, toggled by UPDATE_CHECK_ENABLED.
    """

    def __init__(self, config: NormalizerConfig, client_factory: Optional[HttpClientFactory] = None):
        self.config = config
        self.client_factory = client_factory or HttpClientFactory(config)

    @property
    def local_path(self) -> Path:
        if self.config.UPDATE_CHECK_LOCAL_PATH:
            return Path(self.config.UPDATE_CHECK_LOCAL_PATH)
        return Path(normalizer.__file__)

    def check(self) -> UpdateCheckStatus:
        if not self.config.UPDATE_CHECK_ENABLED:
            logger.debug("Update check disabled")
            return UpdateCheckStatus.DISABLED
        if not self.config.UPDATE_CHECK_URL:
            logger.info("Update check enabled but UPDATE_CHECK_URL is empty, skipping")
            return UpdateCheckStatus.DISABLED

        url = self.config.UPDATE_CHECK_URL
        try:
            with self.client_factory.create_sync_client(
                timeout=self.config.UPDATE_CHECK_TIMEOUT
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                remote_digest = sha256_hex(response.content)
        except httpx.HTTPError as e:
            logger.warning(f"Unable to check for update: {e}", extra={"url": url})
            return UpdateCheckStatus.FETCH_FAILED

        try:
            local_digest = sha256_hex(self.local_path.read_bytes())
        except OSError as e:
            logger.warning(
                f"Unable to read local file for update check: {e}",
                extra={"url": url, "path": str(self.local_path)},
            )
            return UpdateCheckStatus.LOCAL_UNREADABLE

        if local_digest != remote_digest:
            logger.warning(
                f"Online version and local version differ: {self.local_path}",
                extra={"url": url, "local_sha256": local_digest, "remote_sha256": remote_digest},
            )
            return UpdateCheckStatus.DIFFERS

        logger.info("Local version matches online version", extra={"url": url})
        return UpdateCheckStatus.UP_TO_DATE


def run_update_check(config: Optional[NormalizerConfig] = None) -> UpdateCheckStatus:
    """Run the update check with the loaded settings."""
    return UpdateChecker(config or default_config).check()
