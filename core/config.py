# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  Entry points call
# load_dotenv() first, so a local .env file works the same way as real
# environment variables.
#
#   POLIGRAPH_BASE_URL    Upstream API origin, also used for public links
#   POLIGRAPH_USER_AGENT  User-Agent sent on every upstream request
#   MCP_HOST / PORT       Bind address for the HTTP transport
#   LOG_LEVEL             Root logging level (DEBUG, INFO, ...)
# =============================================================================

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_BASE_URL = "https://poligraph.fr"
SERVER_VERSION = "2.0.0"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, immutable once read."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = f"poligraph-mcp/{SERVER_VERSION}"
    host: str = "127.0.0.1"
    port: int = 3001
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment (once per process)."""
    return Settings(
        base_url=os.environ.get("POLIGRAPH_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        user_agent=os.environ.get("POLIGRAPH_USER_AGENT", f"poligraph-mcp/{SERVER_VERSION}"),
        host=os.environ.get("MCP_HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "3001")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
