"""Utility functions for confluence_rpc."""

from confluence_rpc.utils.files import read_upload, require_argument

__all__ = ["read_upload", "require_argument"]
