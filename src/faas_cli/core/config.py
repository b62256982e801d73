"""Template store configuration.

The store URL is layered: `--url` flag, then the OPENFAAS_TEMPLATE_STORE_URL
environment variable, then the official store.
"""

import os
from dataclasses import dataclass

# URL where the official store can be found
DEFAULT_TEMPLATES_STORE = "https://raw.githubusercontent.com/openfaas/store/master/templates.json"

TEMPLATE_STORE_URL_ENVIRONMENT = "OPENFAAS_TEMPLATE_STORE_URL"


@dataclass(frozen=True)
class StoreConfig:
    """Store settings loaded from the environment.

    An unset or empty variable is stored as an empty string.
    """

    store_url: str

    @staticmethod
    def from_env() -> "StoreConfig":
        """Load configuration from environment variables."""
        return StoreConfig(store_url=os.environ.get(TEMPLATE_STORE_URL_ENVIRONMENT, ""))


def resolve_store_url(flag_url: str, env_url: str, default_url: str) -> str:
    """Pick the effective store URL.

    Args:
        flag_url: Value given on the command line ("" when not given)
        env_url: Value of the environment override ("" when unset)
        default_url: Built-in store URL

    Returns:
        flag_url if non-empty, else env_url if non-empty, else default_url
    """
    if flag_url:
        return flag_url
    if env_url:
        return env_url
    return default_url
