"""
Endpoint models.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# Forwarding headers carry no port.
UNKNOWN_PORT = -1


def format_endpoint(address: Any, port: Any) -> str:
    """Build an ``address:port`` string."""
    return f"{address}:{port}"


class Endpoints(BaseModel):
    """Resolved remote, local and (optional) proxy endpoints of one request."""

    model_config = ConfigDict(frozen=True)

    remote: str
    local: str
    proxy: Optional[str] = None

    @property
    def is_proxied(self) -> bool:
        return self.proxy is not None
