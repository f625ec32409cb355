"""FileIOHandler: file-system-based binary file storage."""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from contentkit.errors import HandlerError, NotFoundError
from contentkit.io._handler import (
    StorageBinaryFile,
    StorageBinaryFileCreateStruct,
    iter_chunks,
    utc_now,
)

_PAYLOAD_SUFFIX = ".bin"
_META_SUFFIX = ".meta.json"

_log = logging.getLogger("contentkit.io.file")


class FileIOHandler:
    """File-system-based binary file handler.

    Store each payload as ``<id>.bin`` and its metadata as ``<id>.meta.json``
    under a root directory. The metadata sidecars are the identifier index and
    are reloaded when a handler is opened on an existing root.
    """

    def __init__(self, root: str | Path, *, url_prefix: str = "/storage", chunk_size: int = 65536) -> None:
        """Initialize with a root directory, creating it if needed."""
        if chunk_size <= 0:
            msg = "chunk_size must be > 0."
            raise ValueError(msg)
        self._root = Path(root)
        self._url_prefix = url_prefix.rstrip("/")
        self._chunk_size = chunk_size
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Cannot create storage root {str(self._root)!r}"
            raise HandlerError(msg) from exc
        self._records: dict[str, StorageBinaryFile] = {}
        self._load_records()

    @property
    def root(self) -> Path:
        """Return the root directory path."""
        return self._root

    def _resolve_path(self, binary_file_id: str, *, suffix: str) -> Path | None:
        """Resolve a storage path and ensure it stays under the root."""
        root = self._root.resolve()
        try:
            candidate = (self._root / f"{binary_file_id}{suffix}").resolve()
            candidate.relative_to(root)
        except ValueError:
            # Outside the root, or not a representable path (e.g. embedded NUL).
            return None
        return candidate

    def _payload_path(self, binary_file_id: str) -> Path | None:
        return self._resolve_path(binary_file_id, suffix=_PAYLOAD_SUFFIX)

    def _meta_path(self, binary_file_id: str) -> Path | None:
        return self._resolve_path(binary_file_id, suffix=_META_SUFFIX)

    def _record_to_payload(self, record: StorageBinaryFile) -> dict[str, object]:
        """Serialize a StorageBinaryFile for its metadata sidecar."""
        return {
            "id": record.id,
            "path": record.path,
            "size": record.size,
            "mime_type": record.mime_type,
            "original_file": record.original_file,
            "mtime": record.mtime.isoformat(),
            "ctime": record.ctime.isoformat(),
        }

    def _parse_iso_timestamp(self, value: object) -> datetime | None:
        if not isinstance(value, str):
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None

    def _record_from_payload(self, payload: object, *, binary_file_id: str) -> StorageBinaryFile | None:
        """Deserialize one metadata sidecar, returning ``None`` when it is malformed."""
        if not isinstance(payload, dict):
            return None

        payload_id = payload.get("id")
        path = payload.get("path")
        size = payload.get("size")
        mime_type = payload.get("mime_type")
        original_file = payload.get("original_file")

        if (
            payload_id != binary_file_id
            or not isinstance(path, str)
            or not isinstance(size, int)
            or isinstance(size, bool)
            or (mime_type is not None and not isinstance(mime_type, str))
            or (original_file is not None and not isinstance(original_file, str))
        ):
            return None

        mtime = self._parse_iso_timestamp(payload.get("mtime"))
        ctime = self._parse_iso_timestamp(payload.get("ctime"))
        if mtime is None or ctime is None:
            return None

        return StorageBinaryFile(
            id=binary_file_id,
            path=path,
            size=size,
            mime_type=mime_type,
            original_file=original_file,
            uri=f"{self._url_prefix}/{binary_file_id}",
            mtime=mtime,
            ctime=ctime,
        )

    def _load_records(self) -> None:
        """Load metadata sidecars into the in-memory index."""
        for meta_path in self._root.glob(f"*{_META_SUFFIX}"):
            binary_file_id = meta_path.name[: -len(_META_SUFFIX)]
            payload_path = self._payload_path(binary_file_id)
            if payload_path is None or not payload_path.exists():
                continue

            try:
                raw = json.loads(meta_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError):
                _log.warning("skipping unreadable metadata sidecar %s", meta_path)
                continue

            record = self._record_from_payload(raw, binary_file_id=binary_file_id)
            if record is None:
                _log.warning("skipping malformed metadata sidecar %s", meta_path)
                continue
            self._records[binary_file_id] = record

    def _existing_payload_path(self, binary_file_id: str) -> Path:
        """Return the payload path of a known identifier or raise NotFoundError."""
        path = self._payload_path(binary_file_id)
        if binary_file_id not in self._records or path is None or not path.exists():
            raise NotFoundError("BinaryFile", binary_file_id)
        return path

    def create(self, create_struct: StorageBinaryFileCreateStruct) -> StorageBinaryFile:
        """Copy the struct's stream into a payload file and write its sidecar."""
        binary_file_id = uuid.uuid4().hex
        payload_path = self._payload_path(binary_file_id)
        meta_path = self._meta_path(binary_file_id)
        stream = create_struct.input_stream
        if payload_path is None or meta_path is None:
            stream.close()
            msg = f"Generated id {binary_file_id!r} resolves outside storage root."
            raise HandlerError(msg)

        size = 0
        try:
            with payload_path.open("wb") as target:
                for chunk in iter_chunks(stream, self._chunk_size):
                    target.write(chunk)
                    size += len(chunk)
            if size != create_struct.size:
                payload_path.unlink(missing_ok=True)
                _log.warning("size mismatch for %s: declared=%d read=%d", create_struct.path, create_struct.size, size)
                msg = f"Read {size} bytes for {create_struct.path!r}, expected {create_struct.size}"
                raise HandlerError(msg)

            now = utc_now()
            record = StorageBinaryFile(
                id=binary_file_id,
                path=create_struct.path,
                size=size,
                mime_type=create_struct.mime_type,
                original_file=create_struct.original_file,
                uri=f"{self._url_prefix}/{binary_file_id}",
                mtime=now,
                ctime=now,
            )
            meta_path.write_text(json.dumps(self._record_to_payload(record), ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            _log.warning("storing %s failed: error=%s", create_struct.path, exc)
            payload_path.unlink(missing_ok=True)
            meta_path.unlink(missing_ok=True)
            msg = f"Failed to store binary file for {create_struct.path!r}"
            raise HandlerError(msg) from exc
        finally:
            stream.close()

        self._records[binary_file_id] = record
        _log.debug("stored binary file id=%s size=%d path=%s", binary_file_id, size, create_struct.path)
        return record

    def delete(self, binary_file_id: str) -> None:
        """Delete a payload file and its metadata sidecar."""
        payload_path = self._existing_payload_path(binary_file_id)
        meta_path = self._meta_path(binary_file_id)
        try:
            payload_path.unlink()
            if meta_path is not None:
                meta_path.unlink(missing_ok=True)
        except OSError as exc:
            msg = f"Failed to delete binary file {binary_file_id!r}"
            raise HandlerError(msg) from exc
        self._records.pop(binary_file_id, None)

    def load(self, binary_file_id: str) -> StorageBinaryFile:
        """Return the stored record for an identifier."""
        self._existing_payload_path(binary_file_id)
        return self._records[binary_file_id]

    def exists(self, binary_file_id: str) -> bool:
        """Check whether an identifier is stored and its payload is present."""
        path = self._payload_path(binary_file_id)
        return binary_file_id in self._records and path is not None and path.exists()

    def get_file_resource(self, binary_file_id: str) -> BinaryIO:
        """Open the payload file for reading. The caller closes the stream."""
        path = self._existing_payload_path(binary_file_id)
        try:
            return path.open("rb")
        except OSError as exc:
            msg = f"Failed to open binary file {binary_file_id!r}"
            raise HandlerError(msg) from exc

    def get_file_contents(self, binary_file_id: str) -> bytes:
        """Read the full payload file."""
        path = self._existing_payload_path(binary_file_id)
        try:
            return path.read_bytes()
        except OSError as exc:
            msg = f"Failed to read binary file {binary_file_id!r}"
            raise HandlerError(msg) from exc
