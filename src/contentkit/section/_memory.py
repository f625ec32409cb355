"""In-memory section persistence for development and testing."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from contentkit.errors import NotFoundError
from contentkit.section._handler import StorageSection
from contentkit.section._values import ContentInfo

if TYPE_CHECKING:
    from collections.abc import Iterable


class InMemorySectionHandler:
    """Dict-based section handler with content assignments."""

    def __init__(self) -> None:
        """Initialize an empty handler."""
        self._sections: dict[int, StorageSection] = {}
        self._assignments: dict[int, int] = {}
        self._ids = itertools.count(1)

    def create(self, name: str, identifier: str) -> StorageSection:
        """Create a section with the next free ID."""
        section = StorageSection(id=next(self._ids), identifier=identifier, name=name)
        self._sections[section.id] = section
        return section

    def update(self, section_id: int, name: str, identifier: str) -> StorageSection:
        """Overwrite name and identifier of a section."""
        self.load(section_id)
        section = StorageSection(id=section_id, identifier=identifier, name=name)
        self._sections[section_id] = section
        return section

    def load(self, section_id: int) -> StorageSection:
        """Load a section by ID."""
        section = self._sections.get(section_id)
        if section is None:
            raise NotFoundError("Section", section_id)
        return section

    def load_by_identifier(self, identifier: str) -> StorageSection:
        """Load a section by identifier."""
        for section in self._sections.values():
            if section.identifier == identifier:
                return section
        raise NotFoundError("Section", identifier)

    def load_all(self) -> list[StorageSection]:
        """Load all sections ordered by ID."""
        return [self._sections[section_id] for section_id in sorted(self._sections)]

    def assignments_count(self, section_id: int) -> int:
        """Count the contents assigned to a section."""
        return sum(1 for assigned in self._assignments.values() if assigned == section_id)

    def assign(self, section_id: int, content_id: int) -> None:
        """Assign a content to a section."""
        self.load(section_id)
        self._assignments[content_id] = section_id

    def unassign(self, content_id: int) -> None:
        """Remove the section assignment of a content."""
        if self._assignments.pop(content_id, None) is None:
            raise NotFoundError("ContentInfo", content_id)

    def section_of(self, content_id: int) -> int | None:
        """Return the section ID a content is assigned to."""
        return self._assignments.get(content_id)

    def delete(self, section_id: int) -> None:
        """Delete a section."""
        if self._sections.pop(section_id, None) is None:
            raise NotFoundError("Section", section_id)


class InMemoryContentInfoLoader:
    """Content info lookup over a fixed set of content IDs."""

    def __init__(self, content_ids: Iterable[int] = ()) -> None:
        """Initialize with the known content IDs."""
        self._content_ids = set(content_ids)

    def add(self, content_id: int) -> None:
        """Register a content ID."""
        self._content_ids.add(content_id)

    def load_content_info(self, content_id: int) -> ContentInfo:
        """Return content info for a known content ID."""
        if content_id not in self._content_ids:
            raise NotFoundError("ContentInfo", content_id)
        return ContentInfo(content_id=content_id)
