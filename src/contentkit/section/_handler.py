"""SectionHandler and ContentInfoLoader: protocols for section persistence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from contentkit.section._values import ContentInfo


@dataclass(frozen=True, slots=True)
class StorageSection:
    """Persistence-side section record."""

    id: int
    identifier: str
    name: str


@runtime_checkable
class SectionHandler(Protocol):
    """Section persistence protocol.

    Lookups of unknown sections raise ``NotFoundError``. Uniqueness of
    identifiers is enforced by the service, not the handler.
    """

    def create(self, name: str, identifier: str) -> StorageSection:
        """Create a section and return it with its assigned ID."""
        ...

    def update(self, section_id: int, name: str, identifier: str) -> StorageSection:
        """Overwrite name and identifier of a section."""
        ...

    def load(self, section_id: int) -> StorageSection:
        """Load a section by ID."""
        ...

    def load_by_identifier(self, identifier: str) -> StorageSection:
        """Load a section by identifier."""
        ...

    def load_all(self) -> Sequence[StorageSection]:
        """Load all sections."""
        ...

    def assignments_count(self, section_id: int) -> int:
        """Count the contents assigned to a section."""
        ...

    def assign(self, section_id: int, content_id: int) -> None:
        """Assign a content to a section, replacing any previous assignment."""
        ...

    def delete(self, section_id: int) -> None:
        """Delete a section."""
        ...


@runtime_checkable
class ContentInfoLoader(Protocol):
    """Lookup of content metadata by content ID."""

    def load_content_info(self, content_id: int) -> ContentInfo:
        """Load content info, raising ``NotFoundError`` when absent."""
        ...
