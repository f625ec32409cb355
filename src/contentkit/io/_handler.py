"""IOHandler: protocol for binary file storage backends."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator


def utc_now() -> datetime:
    """Return the current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def iter_chunks(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Read a stream to completion in fixed-size chunks."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


@dataclass(slots=True)
class StorageBinaryFileCreateStruct:
    """Storage-facing create request.

    The handler owns `input_stream` once ``create`` is called and closes it
    whether or not storing succeeds. Handlers reject a stream whose length
    differs from `size`.
    """

    path: str
    size: int
    mime_type: str
    original_file: str
    input_stream: BinaryIO


@dataclass(frozen=True, slots=True)
class StorageBinaryFile:
    """One stored binary file and its handler-side metadata."""

    id: str
    path: str
    size: int
    mime_type: str | None
    original_file: str | None
    uri: str
    mtime: datetime
    ctime: datetime


@runtime_checkable
class IOHandler(Protocol):
    """Binary file storage protocol.

    Implementations assign opaque identifiers, keep the identifier index
    themselves and raise ``NotFoundError`` for unknown identifiers.
    """

    def create(self, create_struct: StorageBinaryFileCreateStruct) -> StorageBinaryFile:
        """Store the bytes read from the struct's stream and return the stored record."""
        ...

    def delete(self, binary_file_id: str) -> None:
        """Delete a stored file by identifier."""
        ...

    def load(self, binary_file_id: str) -> StorageBinaryFile:
        """Load the stored record for an identifier."""
        ...

    def exists(self, binary_file_id: str) -> bool:
        """Check whether an identifier is stored."""
        ...

    def get_file_resource(self, binary_file_id: str) -> BinaryIO:
        """Open a read stream on the stored bytes. The caller closes it."""
        ...

    def get_file_contents(self, binary_file_id: str) -> bytes:
        """Return the full stored bytes."""
        ...
