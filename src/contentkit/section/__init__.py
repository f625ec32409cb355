"""Sections: SectionService, persistence handlers and values."""

from contentkit.section._handler import ContentInfoLoader, SectionHandler, StorageSection
from contentkit.section._memory import InMemoryContentInfoLoader, InMemorySectionHandler
from contentkit.section._service import SectionService
from contentkit.section._values import ContentInfo, Section, SectionCreateStruct, SectionUpdateStruct

__all__ = [
    "ContentInfo",
    "ContentInfoLoader",
    "InMemoryContentInfoLoader",
    "InMemorySectionHandler",
    "Section",
    "SectionCreateStruct",
    "SectionHandler",
    "SectionService",
    "SectionUpdateStruct",
    "StorageSection",
]
