"""
Account configuration utilities.

Usage:
    from simplisafe.config import load_account_config

    username, password = load_account_config("home")
"""

from simplisafe.config.loader import (
    get_config_path,
    load_account_config,
    load_client_settings,
)

__all__ = ["load_account_config", "load_client_settings", "get_config_path"]
