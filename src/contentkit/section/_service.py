"""SectionService: section CRUD with identifier and assignment guards."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contentkit.errors import AlreadyExistsError, BadStateError, NotFoundError
from contentkit.section._values import ContentInfo, Section, SectionCreateStruct, SectionUpdateStruct
from contentkit.validation import optional_string, require_int, require_string

if TYPE_CHECKING:
    from contentkit.section._handler import ContentInfoLoader, SectionHandler, StorageSection

_log = logging.getLogger("contentkit.section")


def _build_section(stored: StorageSection) -> Section:
    return Section(id=stored.id, identifier=stored.identifier, name=stored.name)


class SectionService:
    """Service for section operations."""

    def __init__(self, handler: SectionHandler, content_info_loader: ContentInfoLoader | None = None) -> None:
        """Initialize with a section handler and an optional content lookup."""
        self._handler = handler
        self._content_info_loader = content_info_loader

    def _identifier_taken(self, identifier: str, *, other_than: int | None = None) -> bool:
        try:
            existing = self._handler.load_by_identifier(identifier)
        except NotFoundError:
            return False
        return existing.id != other_than

    def create_section(self, create_struct: SectionCreateStruct) -> Section:
        """Create a section. Raise AlreadyExistsError if the identifier is taken."""
        name = require_string(create_struct.name, field_name="name", what="SectionCreateStruct")
        identifier = require_string(create_struct.identifier, field_name="identifier", what="SectionCreateStruct")

        if self._identifier_taken(identifier):
            _log.warning("section identifier %r already exists", identifier)
            raise AlreadyExistsError("identifier", identifier)

        created = self._handler.create(name, identifier)
        _log.debug("created section id=%s identifier=%r", created.id, identifier)
        return _build_section(created)

    def update_section(self, section: Section, update_struct: SectionUpdateStruct) -> Section:
        """Update name and/or identifier of a section.

        Fields left as ``None`` in the update struct keep their current value.
        A new identifier already used by another section raises AlreadyExistsError.
        """
        section_id = require_int(section.id, field_name="id", what="Section")
        name = optional_string(update_struct.name, field_name="name", what="SectionUpdateStruct")
        identifier = optional_string(update_struct.identifier, field_name="identifier", what="SectionUpdateStruct")

        if identifier is not None and self._identifier_taken(identifier, other_than=section_id):
            _log.warning("section identifier %r already exists", identifier)
            raise AlreadyExistsError("identifier", identifier)

        loaded = self.load_section(section_id)
        updated = self._handler.update(
            loaded.id,
            name if name is not None else loaded.name,
            identifier if identifier is not None else loaded.identifier,
        )
        return _build_section(updated)

    def load_section(self, section_id: int) -> Section:
        """Load a section by ID."""
        section_id = require_int(section_id, field_name="section_id")
        return _build_section(self._handler.load(section_id))

    def load_sections(self) -> list[Section]:
        """Load all sections."""
        return [_build_section(stored) for stored in self._handler.load_all()]

    def load_section_by_identifier(self, section_identifier: str) -> Section:
        """Load a section by its identifier."""
        section_identifier = require_string(section_identifier, field_name="section_identifier")
        return _build_section(self._handler.load_by_identifier(section_identifier))

    def count_assigned_contents(self, section: Section) -> int:
        """Count the contents assigned to a section."""
        section_id = require_int(section.id, field_name="id", what="Section")
        return self._handler.assignments_count(section_id)

    def assign_section(self, content_info: ContentInfo, section: Section) -> None:
        """Assign a content to a section, replacing its current section."""
        content_id = require_int(content_info.content_id, field_name="content_id", what="ContentInfo")
        section_id = require_int(section.id, field_name="id", what="Section")

        if self._content_info_loader is not None:
            content_id = self._content_info_loader.load_content_info(content_id).content_id
        loaded = self.load_section(section_id)

        self._handler.assign(loaded.id, content_id)
        _log.debug("assigned content %s to section %s", content_id, loaded.id)

    def delete_section(self, section: Section) -> None:
        """Delete a section. Raise BadStateError while contents are still assigned to it."""
        section_id = require_int(section.id, field_name="id", what="Section")
        loaded = self.load_section(section_id)

        assigned = self.count_assigned_contents(loaded)
        if assigned > 0:
            _log.warning("refusing to delete section %s with %d assigned contents", loaded.id, assigned)
            raise BadStateError("section", f"still assigned to {assigned} contents")

        self._handler.delete(loaded.id)
        _log.debug("deleted section id=%s", loaded.id)

    def new_section_create_struct(self) -> SectionCreateStruct:
        """Return an empty SectionCreateStruct."""
        return SectionCreateStruct()

    def new_section_update_struct(self) -> SectionUpdateStruct:
        """Return an empty SectionUpdateStruct."""
        return SectionUpdateStruct()
