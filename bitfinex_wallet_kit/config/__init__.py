"""
Configuration management for the wallet kit.

Settings are read from environment variables with a .env file fallback.
"""

from .environment import WalletKitConfig, load_config, read_env_file

__all__ = ["WalletKitConfig", "load_config", "read_env_file"]
