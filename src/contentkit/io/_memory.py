"""InMemoryIOHandler: dict-based binary file storage for development and testing."""

from __future__ import annotations

import io
import logging
import uuid
from typing import TYPE_CHECKING, BinaryIO

from contentkit.errors import HandlerError, NotFoundError
from contentkit.io._handler import (
    StorageBinaryFile,
    StorageBinaryFileCreateStruct,
    iter_chunks,
    utc_now,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

_log = logging.getLogger("contentkit.io.memory")


class InMemoryIOHandler:
    """In-memory binary file handler for development and testing."""

    def __init__(self, *, url_prefix: str = "/storage", chunk_size: int = 65536) -> None:
        """Initialize an empty in-memory handler."""
        if chunk_size <= 0:
            msg = "chunk_size must be > 0."
            raise ValueError(msg)
        self._url_prefix = url_prefix.rstrip("/")
        self._chunk_size = chunk_size
        self._files: dict[str, StorageBinaryFile] = {}
        self._contents: dict[str, bytes] = {}

    @classmethod
    def from_preloaded(
        cls,
        files_by_id: Mapping[str, tuple[StorageBinaryFile, bytes]],
        *,
        url_prefix: str = "/storage",
    ) -> InMemoryIOHandler:
        """Build a handler from preloaded ``(StorageBinaryFile, bytes)`` data."""
        handler = cls(url_prefix=url_prefix)
        for record, data in files_by_id.values():
            handler._files[record.id] = record
            handler._contents[record.id] = data
        return handler

    def __len__(self) -> int:
        return len(self._files)

    def create(self, create_struct: StorageBinaryFileCreateStruct) -> StorageBinaryFile:
        """Read the struct's stream into memory and return the stored record."""
        stream = create_struct.input_stream
        try:
            data = b"".join(iter_chunks(stream, self._chunk_size))
        except OSError as exc:
            _log.warning("reading input stream failed: path=%s error=%s", create_struct.path, exc)
            msg = f"Failed to read input stream for {create_struct.path!r}"
            raise HandlerError(msg) from exc
        finally:
            stream.close()

        if len(data) != create_struct.size:
            _log.warning("size mismatch for %s: declared=%d read=%d", create_struct.path, create_struct.size, len(data))
            msg = f"Read {len(data)} bytes for {create_struct.path!r}, expected {create_struct.size}"
            raise HandlerError(msg)

        binary_file_id = uuid.uuid4().hex
        now = utc_now()
        record = StorageBinaryFile(
            id=binary_file_id,
            path=create_struct.path,
            size=len(data),
            mime_type=create_struct.mime_type,
            original_file=create_struct.original_file,
            uri=f"{self._url_prefix}/{binary_file_id}",
            mtime=now,
            ctime=now,
        )
        self._files[binary_file_id] = record
        self._contents[binary_file_id] = data
        _log.debug("stored binary file id=%s size=%d", binary_file_id, record.size)
        return record

    def delete(self, binary_file_id: str) -> None:
        """Delete a stored file by identifier."""
        if self._files.pop(binary_file_id, None) is None:
            raise NotFoundError("BinaryFile", binary_file_id)
        self._contents.pop(binary_file_id, None)

    def load(self, binary_file_id: str) -> StorageBinaryFile:
        """Return the stored record for an identifier."""
        record = self._files.get(binary_file_id)
        if record is None:
            raise NotFoundError("BinaryFile", binary_file_id)
        return record

    def exists(self, binary_file_id: str) -> bool:
        """Check whether an identifier is stored."""
        return binary_file_id in self._files

    def get_file_resource(self, binary_file_id: str) -> BinaryIO:
        """Return a fresh read stream over the stored bytes."""
        return io.BytesIO(self.get_file_contents(binary_file_id))

    def get_file_contents(self, binary_file_id: str) -> bytes:
        """Return the stored bytes."""
        data = self._contents.get(binary_file_id)
        if data is None:
            raise NotFoundError("BinaryFile", binary_file_id)
        return data
