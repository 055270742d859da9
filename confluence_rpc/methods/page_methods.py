"""Page and label wrappers."""

from __future__ import annotations

from typing import Any, Mapping

from loguru import logger

from confluence_rpc.marshal import long, page, page_update_options, string
from confluence_rpc.utils.files import require_argument


class PageMethods:
    def get_page(self, page_id: Any) -> Any:
        require_argument(page_id, "page ID")
        logger.debug(f"getPage: {page_id}")
        return self.dispatch("getPage", string(page_id))

    def get_page_history(self, page_id: Any) -> Any:
        require_argument(page_id, "page ID")
        logger.debug(f"getPageHistory: {page_id}")
        return self.dispatch("getPageHistory", string(page_id))

    def store_page(self, page_record: Mapping[str, Any]) -> Any:
        """Page storePage(String token, Page page) - add or update a page.

        A new page needs ``space``, ``title`` and ``content``; updating an
        existing one also needs its ``id`` and current ``version``.
        """
        logger.debug("storePage")
        return self.dispatch("storePage", page(page_record))

    def update_page(self, page_record: Mapping[str, Any], options: Mapping[str, Any] | None = None) -> Any:
        """Page updatePage(String token, Page page, PageUpdateOptions options)."""
        logger.debug("updatePage")
        return self.dispatch("updatePage", page(page_record), page_update_options(options or {}))

    def add_label_by_name(self, label_name: str, object_id: Any) -> Any:
        require_argument(label_name, "label name")
        require_argument(object_id, "content ID")
        logger.debug(f"addLabelByName: {label_name} on {object_id}")
        return self.dispatch("addLabelByName", string(label_name), long(object_id))

    def remove_label_by_name(self, label_name: str, object_id: Any) -> Any:
        require_argument(label_name, "label name")
        require_argument(object_id, "content ID")
        logger.debug(f"removeLabelByName: {label_name} on {object_id}")
        return self.dispatch("removeLabelByName", string(label_name), long(object_id))
