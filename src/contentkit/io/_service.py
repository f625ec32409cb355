"""IOService: validated ingestion and retrieval of binary files."""

from __future__ import annotations

import logging
import mimetypes
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from pydantic import ValidationError

from contentkit.errors import InvalidArgumentError, InvalidArgumentValue, NotFoundError
from contentkit.io._handler import StorageBinaryFile, StorageBinaryFileCreateStruct
from contentkit.io._values import BinaryFile, BinaryFileCreateStruct, UploadedFile
from contentkit.settings import IOSettings
from contentkit.validation import is_readable_stream, require_non_empty_string, require_non_negative_int

if TYPE_CHECKING:
    from contentkit.io._handler import IOHandler

_log = logging.getLogger("contentkit.io")

_CREATE_STRUCT = "BinaryFileCreateStruct"


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def _open_for_read(path: Path, *, argument_name: str) -> BinaryIO:
    try:
        return path.open("rb")
    except OSError as exc:
        raise InvalidArgumentError(argument_name, "failed to get file resource") from exc


class IOService:
    """Service for creating, loading and deleting binary files.

    Input is validated before the handler is called; storage records are
    mapped to public ``BinaryFile`` values on the way out.
    """

    def __init__(self, handler: IOHandler, settings: IOSettings | None = None) -> None:
        """Initialize with a storage handler and optional settings."""
        self._handler = handler
        self._settings = settings if settings is not None else IOSettings()

    @property
    def settings(self) -> IOSettings:
        """Return the service settings."""
        return self._settings

    def _is_uploaded_file(self, path: Path) -> bool:
        """Return whether a path is a regular file inside the upload directory."""
        upload_dir = self._settings.effective_upload_dir.resolve()
        try:
            path.resolve().relative_to(upload_dir)
        except ValueError:
            return False
        return path.is_file()

    def new_binary_create_struct_from_uploaded_file(
        self,
        uploaded_file: UploadedFile | Mapping[str, object],
    ) -> BinaryFileCreateStruct:
        """Build a create-struct from an uploaded file descriptor.

        The returned struct holds an open read stream on ``tmp_name``; pass it
        to ``create_binary_file`` or close it.
        """
        if not isinstance(uploaded_file, UploadedFile):
            if not isinstance(uploaded_file, Mapping):
                raise InvalidArgumentError("uploaded_file", "expected an upload descriptor mapping")
            try:
                uploaded_file = UploadedFile.model_validate(dict(uploaded_file))
            except ValidationError as exc:
                field = ".".join(str(part) for part in exc.errors()[0]["loc"]) or "descriptor"
                raise InvalidArgumentError("uploaded_file", f"{field} does not exist or has invalid value") from exc

        tmp_path = Path(uploaded_file.tmp_name)
        if not self._is_uploaded_file(tmp_path) or not _is_readable_file(tmp_path):
            _log.warning("rejected upload artifact %s", uploaded_file.tmp_name)
            raise InvalidArgumentError("uploaded_file", "file was not uploaded or is unreadable")

        return BinaryFileCreateStruct(
            mime_type=uploaded_file.type,
            uri=uploaded_file.tmp_name,
            original_file_name=uploaded_file.name,
            size=uploaded_file.size,
            input_stream=_open_for_read(tmp_path, argument_name="uploaded_file"),
        )

    def new_binary_create_struct_from_local_file(self, local_file: str | os.PathLike[str]) -> BinaryFileCreateStruct:
        """Build a create-struct from a local file.

        The mime type is guessed from the file extension with ``mimetypes``; the
        content is not inspected. Unknown extensions get
        ``settings.default_mime_type``.
        """
        if isinstance(local_file, os.PathLike):
            local_file = os.fspath(local_file)
        if not isinstance(local_file, str) or not local_file:
            raise InvalidArgumentError("local_file", "local_file has an invalid value")

        path = Path(local_file)
        if not _is_readable_file(path):
            raise InvalidArgumentError("local_file", f"file does not exist or is unreadable: {local_file}")

        mime_type, _ = mimetypes.guess_type(path.name)
        try:
            size = path.stat().st_size
        except OSError as exc:
            raise InvalidArgumentError("local_file", f"cannot stat file: {local_file}") from exc

        return BinaryFileCreateStruct(
            mime_type=mime_type or self._settings.default_mime_type,
            uri=local_file,
            original_file_name=path.name,
            size=size,
            input_stream=_open_for_read(path, argument_name="local_file"),
        )

    def create_binary_file(self, create_struct: BinaryFileCreateStruct) -> BinaryFile:
        """Validate a create-struct and store it through the handler.

        Ownership of ``create_struct.input_stream`` passes to the handler.
        """
        mime_type = require_non_empty_string(create_struct.mime_type, field_name="mime_type", what=_CREATE_STRUCT)
        uri = require_non_empty_string(create_struct.uri, field_name="uri", what=_CREATE_STRUCT)
        original_file_name = require_non_empty_string(
            create_struct.original_file_name, field_name="original_file_name", what=_CREATE_STRUCT
        )
        size = require_non_negative_int(create_struct.size, field_name="size", what=_CREATE_STRUCT)
        if not is_readable_stream(create_struct.input_stream):
            raise InvalidArgumentValue("input_stream", "property is not a readable stream", _CREATE_STRUCT)

        storage_struct = StorageBinaryFileCreateStruct(
            path=uri,
            size=size,
            mime_type=mime_type,
            original_file=original_file_name,
            input_stream=create_struct.input_stream,
        )
        stored = self._handler.create(storage_struct)
        _log.debug("created binary file id=%s from %s", stored.id, uri)
        return self._build_binary_file(stored)

    def delete_binary_file(self, binary_file: BinaryFile) -> None:
        """Delete a binary file. Raise NotFoundError when it does not exist."""
        binary_file_id = require_non_empty_string(binary_file.id, field_name="id", what="BinaryFile")
        self._handler.delete(binary_file_id)
        _log.debug("deleted binary file id=%s", binary_file_id)

    def load_binary_file(self, binary_file_id: str) -> BinaryFile | None:
        """Load a binary file by ID, returning ``None`` when it does not exist."""
        binary_file_id = require_non_empty_string(binary_file_id, field_name="binary_file_id")
        try:
            stored = self._handler.load(binary_file_id)
        except NotFoundError:
            return None
        return self._build_binary_file(stored)

    def binary_file_exists(self, binary_file_id: str) -> bool:
        """Check whether a binary file ID is stored."""
        binary_file_id = require_non_empty_string(binary_file_id, field_name="binary_file_id")
        return self._handler.exists(binary_file_id)

    def get_file_input_stream(self, binary_file: BinaryFile) -> BinaryIO:
        """Return an open read stream on the file contents. The caller closes it."""
        binary_file_id = require_non_empty_string(binary_file.id, field_name="id", what="BinaryFile")
        return self._handler.get_file_resource(binary_file_id)

    def get_file_contents(self, binary_file: BinaryFile) -> bytes:
        """Return the full file contents in memory.

        No size limit is applied; use ``get_file_input_stream`` for large files.
        """
        binary_file_id = require_non_empty_string(binary_file.id, field_name="id", what="BinaryFile")
        return self._handler.get_file_contents(binary_file_id)

    def _build_binary_file(self, stored: StorageBinaryFile) -> BinaryFile:
        return BinaryFile(
            id=stored.id,
            size=int(stored.size),
            mtime=stored.mtime,
            ctime=stored.ctime,
            mime_type=stored.mime_type,
            uri=stored.uri,
            original_file=stored.original_file,
        )
