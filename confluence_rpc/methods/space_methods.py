"""Space management wrappers."""

from __future__ import annotations

import os
from typing import Any, Mapping

from loguru import logger

from confluence_rpc.marshal import base64, boolean, space, string
from confluence_rpc.utils.files import read_upload, require_argument


class SpaceMethods:
    def add_space(self, space_record: Mapping[str, Any]) -> Any:
        """Space addSpace(String token, Space space)."""
        logger.debug("addSpace")
        return self.dispatch("addSpace", space(space_record))

    def store_space(self, space_record: Mapping[str, Any]) -> Any:
        """Space storeSpace(String token, Space space) - update an existing space."""
        logger.debug("storeSpace")
        return self.dispatch("storeSpace", space(space_record))

    def convert_to_personal_space(
        self,
        user_name: str,
        space_key: str,
        new_space_name: str,
        update_links: Any = False,
    ) -> Any:
        """Turn a global space into the personal space of ``user_name``."""
        require_argument(user_name, "user name")
        require_argument(space_key, "space key")
        logger.debug(f"convertToPersonalSpace: {space_key} -> ~{user_name}")
        return self.dispatch(
            "convertToPersonalSpace",
            string(user_name),
            string(space_key),
            string(new_space_name),
            boolean(update_links),
        )

    def import_space(self, space_data_file: str | os.PathLike[str]) -> Any:
        """Upload a zipped Confluence space export."""
        _, contents = read_upload(space_data_file)
        logger.debug(f"importSpace: {len(contents)} bytes")
        return self.dispatch("importSpace", base64(contents))
