"""Upload and delete files in the Mixcore file store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from .callbacks import ActionCallback, run_with_callback
from .models import UploadedFile

if TYPE_CHECKING:
    from .config import Endpoints
    from .ports import ITransport

logger = logging.getLogger(__name__)


class MixcoreStorage:
    """Upload files to, and delete files from, the Mixcore file store."""

    def __init__(self, transport: ITransport, endpoints: Endpoints) -> None:
        self._transport = transport
        self._endpoints = endpoints

    async def upload_file(
        self,
        file: str | Path | bytes | IO[bytes],
        *,
        filename: str | None = None,
        folder: str | None = None,
        content_type: str = "application/octet-stream",
        callback: ActionCallback[UploadedFile] | None = None,
    ) -> UploadedFile:
        """Upload *file* (a path, raw bytes or a binary file object).

        Args:
            file: Content to upload.
            filename: Name stored on the server.  Defaults to the path's name.
            folder: Target folder on the server.
            content_type: MIME type of the part.
        """
        if isinstance(file, (str, Path)):
            path = Path(file)
            content: bytes | IO[bytes] = path.read_bytes()
            filename = filename or path.name
        else:
            content = file
        if not filename:
            raise ValueError("filename is required when uploading bytes or streams")

        data: dict[str, Any] = {"folder": folder} if folder else {}
        logger.debug("Uploading %s to folder %s", filename, folder or "<default>")
        return await run_with_callback(
            self._upload(filename, content, content_type, data), callback
        )

    async def _upload(
        self,
        filename: str,
        content: bytes | IO[bytes],
        content_type: str,
        data: dict[str, Any],
    ) -> UploadedFile:
        body = await self._transport.post(
            self._endpoints.storage.upload,
            files={"file": (filename, content, content_type)},
            data=data,
        )
        if isinstance(body, str):
            return UploadedFile(file_path=body)
        return UploadedFile.model_validate(body or {})

    async def delete_file(
        self,
        full_path: str,
        callback: ActionCallback[Any] | None = None,
    ) -> Any:
        """Delete the file stored at *full_path*."""
        return await run_with_callback(
            self._transport.delete(
                self._endpoints.storage.delete, params={"fullPath": full_path}
            ),
            callback,
        )


__all__: list[str] = ["MixcoreStorage"]
