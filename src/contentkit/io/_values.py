"""Public binary file values: create-struct, BinaryFile and the upload descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field


@dataclass(slots=True)
class BinaryFileCreateStruct:
    """Caller-populated description of a binary file before it is stored.

    `input_stream` is handed over to the storage handler by
    ``IOService.create_binary_file`` and must not be reused afterwards.
    """

    mime_type: str | None = None
    uri: str | None = None
    original_file_name: str | None = None
    size: int | None = None
    input_stream: BinaryIO | None = None


@dataclass(frozen=True, slots=True)
class BinaryFile:
    """A stored binary file."""

    id: str
    size: int
    mtime: datetime | None
    ctime: datetime | None
    mime_type: str | None
    uri: str
    original_file: str | None


class UploadedFile(BaseModel):
    """Descriptor of one uploaded file as handed over by the web layer."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    tmp_name: str = Field(min_length=1)
    type: str
    name: str
    size: int = Field(ge=0)
