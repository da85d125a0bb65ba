"""
Account configuration utilities.

Loads SimpliSafe credentials (and optional endpoint overrides) from a YAML
file at the project root. Nothing is ever written back.
"""

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Tuple

from simplisafe.core.types import ClientSettings

logger = logging.getLogger(__name__)

SETTINGS_FIELDS = ("api_url", "realtime_url", "client_id", "client_secret", "timeout_seconds")


def get_config_path() -> Path:
    """
    Get the path to the account configuration file.

    Looks for simplisafe_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "simplisafe_config.yaml"


def _load_account_section(account_key: str) -> Dict[str, Any]:
    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"simplisafe_config.yaml not found at {config_path}. "
            "Copy simplisafe_config.yaml.example to simplisafe_config.yaml and add your account."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except Exception as e:
        raise RuntimeError(f"Error loading account config: {e}") from e

    account_config = config.get(account_key) if isinstance(config, dict) else None
    if not account_config or not isinstance(account_config, dict):
        raise ValueError(
            f"Account '{account_key}' not found in {config_path}. "
            f"Please add the account configuration."
        )
    return account_config


def load_account_config(account_key: str) -> Tuple[str, str]:
    """
    Load account credentials from YAML file at project root.

    Args:
        account_key: The key identifying the account in the config file

    Returns:
        Tuple of (username, password)

    Raises:
        FileNotFoundError: If simplisafe_config.yaml doesn't exist
        ValueError: If required fields (username, password) are missing or empty
        RuntimeError: If the file can't be read or parsed
    """
    account_config = _load_account_section(account_key)

    username = account_config.get("username")
    password = account_config.get("password")

    missing_fields = []
    if not username:
        missing_fields.append("username")
    if not password:
        missing_fields.append("password")

    if missing_fields:
        raise ValueError(
            f"Missing required fields for account '{account_key}': {', '.join(missing_fields)}. "
            f"Please add the credentials to {get_config_path()}"
        )

    return str(username), str(password)


def load_client_settings(account_key: str) -> ClientSettings:
    """
    Build ClientSettings from an account section, using defaults for
    anything not overridden.
    """
    account_config = _load_account_section(account_key)
    overrides = {
        name: account_config[name] for name in SETTINGS_FIELDS if name in account_config
    }
    if "timeout_seconds" in overrides:
        overrides["timeout_seconds"] = float(overrides["timeout_seconds"])
    return ClientSettings(**overrides)
