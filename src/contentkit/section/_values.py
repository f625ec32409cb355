"""Section values: Section, create/update structs and ContentInfo."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Section:
    """A section used to categorize content."""

    id: int
    identifier: str
    name: str


@dataclass(slots=True)
class SectionCreateStruct:
    """Input for creating a section."""

    name: str | None = None
    identifier: str | None = None


@dataclass(slots=True)
class SectionUpdateStruct:
    """Input for updating a section. Fields left as ``None`` keep their current value."""

    name: str | None = None
    identifier: str | None = None


@dataclass(frozen=True, slots=True)
class ContentInfo:
    """Minimal content metadata needed for section assignment."""

    content_id: int
    section_id: int | None = None
