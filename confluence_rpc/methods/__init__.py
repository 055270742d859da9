"""Typed wrappers for remote methods whose arguments are not all strings."""

from confluence_rpc.methods.admin_methods import AdminMethods
from confluence_rpc.methods.attachment_methods import AttachmentMethods
from confluence_rpc.methods.page_methods import PageMethods
from confluence_rpc.methods.space_methods import SpaceMethods

__all__ = ["AdminMethods", "AttachmentMethods", "PageMethods", "SpaceMethods"]
