"""File attachment wrappers."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from confluence_rpc.marshal import attachment, base64, string
from confluence_rpc.utils.files import read_upload, require_argument


class AttachmentMethods:
    def add_attachment(
        self,
        content_id: Any,
        attachment_file: str | os.PathLike[str],
        comment: str | None = None,
    ) -> Any:
        """Upload a local file as an attachment of the page ``content_id``.

        The whole file is read into memory and sent as base64. Missing
        arguments or an unreadable file raise LocalPreconditionError before
        anything is sent.
        """
        require_argument(content_id, "content ID")
        file_name, contents = read_upload(attachment_file)
        record = {
            "fileName": file_name,
            "contentType": self.config.attachment_content_type,
            "comment": comment or self.config.attachment_comment,
        }
        logger.debug(f"addAttachment: {file_name} ({len(contents)} bytes) to {content_id}")
        return self.dispatch("addAttachment", string(content_id), attachment(record), base64(contents))
