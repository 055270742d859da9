"""Configuration module for confluence_rpc."""

from confluence_rpc.config.loader import load_config, save_config, get_config_path
from confluence_rpc.config.schema import ClientConfig, DEFAULT_API_VERSION, DEFAULT_ENCODING

__all__ = [
    "ClientConfig",
    "DEFAULT_API_VERSION",
    "DEFAULT_ENCODING",
    "load_config",
    "save_config",
    "get_config_path",
]
