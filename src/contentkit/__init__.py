"""contentkit: binary file and section services for content repositories."""

import importlib.metadata as importlib_metadata

from contentkit.errors import (
    AlreadyExistsError,
    BadStateError,
    ContentKitError,
    HandlerError,
    InvalidArgumentError,
    InvalidArgumentValue,
    NotFoundError,
)
from contentkit.io import (
    BinaryFile,
    BinaryFileCreateStruct,
    FileIOHandler,
    InMemoryIOHandler,
    IOHandler,
    IOService,
    UploadedFile,
)
from contentkit.section import (
    ContentInfo,
    InMemorySectionHandler,
    Section,
    SectionCreateStruct,
    SectionHandler,
    SectionService,
    SectionUpdateStruct,
)
from contentkit.settings import IOSettings


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("contentkit")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "AlreadyExistsError",
    "BadStateError",
    "BinaryFile",
    "BinaryFileCreateStruct",
    "ContentInfo",
    "ContentKitError",
    "FileIOHandler",
    "HandlerError",
    "IOHandler",
    "IOService",
    "IOSettings",
    "InMemoryIOHandler",
    "InMemorySectionHandler",
    "InvalidArgumentError",
    "InvalidArgumentValue",
    "NotFoundError",
    "Section",
    "SectionCreateStruct",
    "SectionHandler",
    "SectionService",
    "SectionUpdateStruct",
    "UploadedFile",
]
