"""Binary file ingestion: IOService, storage handlers and values."""

from contentkit.io._file import FileIOHandler
from contentkit.io._handler import IOHandler, StorageBinaryFile, StorageBinaryFileCreateStruct
from contentkit.io._memory import InMemoryIOHandler
from contentkit.io._service import IOService
from contentkit.io._values import BinaryFile, BinaryFileCreateStruct, UploadedFile

__all__ = [
    "BinaryFile",
    "BinaryFileCreateStruct",
    "FileIOHandler",
    "IOHandler",
    "IOService",
    "InMemoryIOHandler",
    "StorageBinaryFile",
    "StorageBinaryFileCreateStruct",
    "UploadedFile",
]
