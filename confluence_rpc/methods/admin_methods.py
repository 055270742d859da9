"""Administration and general wrappers."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from confluence_rpc.marshal import base64, boolean, string
from confluence_rpc.utils.files import read_upload, require_argument


class AdminMethods:
    def get_server_info(self) -> Any:
        logger.debug("getServerInfo: no args")
        return self.dispatch("getServerInfo")

    def export_site(self, export_attachments: Any = False) -> Any:
        """Start a site backup; returns the download URL of the archive."""
        logger.debug(f"exportSite: exportAttachments {export_attachments}")
        return self.dispatch("exportSite", boolean(export_attachments))

    def get_cluster_information(self) -> Any:
        logger.debug("getClusterInformation")
        return self.dispatch("getClusterInformation")

    def get_cluster_node_statuses(self) -> Any:
        logger.debug("getClusterNodeStatuses")
        return self.dispatch("getClusterNodeStatuses")

    def is_plugin_enabled(self, plugin_key: str) -> Any:
        require_argument(plugin_key, "plugin key")
        logger.debug(f"isPluginEnabled: pluginKey {plugin_key}")
        return self.dispatch("isPluginEnabled", string(plugin_key))

    def install_plugin(self, plugin_file: str | os.PathLike[str]) -> Any:
        """Upload and install a plugin jar."""
        file_name, contents = read_upload(plugin_file)
        logger.debug(f"installPlugin: {file_name} ({len(contents)} bytes)")
        return self.dispatch("installPlugin", string(file_name), base64(contents))
