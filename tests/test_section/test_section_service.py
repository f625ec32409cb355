"""Tests for SectionService."""

import pytest

from contentkit.errors import AlreadyExistsError, BadStateError, InvalidArgumentValue, NotFoundError
from contentkit.section import (
    ContentInfo,
    InMemoryContentInfoLoader,
    InMemorySectionHandler,
    Section,
    SectionCreateStruct,
    SectionService,
    SectionUpdateStruct,
)


@pytest.fixture
def handler() -> InMemorySectionHandler:
    return InMemorySectionHandler()


@pytest.fixture
def service(handler: InMemorySectionHandler) -> SectionService:
    return SectionService(handler)


def _create(service: SectionService, name: str = "Media", identifier: str = "media") -> Section:
    return service.create_section(SectionCreateStruct(name=name, identifier=identifier))


# ---- create ----


def test_create_section(service: SectionService) -> None:
    section = _create(service)
    assert section == Section(id=1, identifier="media", name="Media")
    assert service.load_section(section.id) == section


def test_create_duplicate_identifier_raises(service: SectionService) -> None:
    _create(service)
    with pytest.raises(AlreadyExistsError) as excinfo:
        _create(service, name="Other media")
    assert excinfo.value.argument_name == "identifier"
    assert len(service.load_sections()) == 1


@pytest.mark.parametrize(
    ("name", "identifier", "field_name"),
    [(None, "media", "name"), (1, "media", "name"), ("Media", None, "identifier")],
)
def test_create_rejects_non_string_fields(
    service: SectionService,
    name: object,
    identifier: object,
    field_name: str,
) -> None:
    struct = SectionCreateStruct(name=name, identifier=identifier)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentValue) as excinfo:
        service.create_section(struct)
    assert excinfo.value.argument_name == field_name
    assert excinfo.value.what == "SectionCreateStruct"


def test_new_structs_are_empty(service: SectionService) -> None:
    assert service.new_section_create_struct() == SectionCreateStruct()
    assert service.new_section_update_struct() == SectionUpdateStruct()


# ---- update ----


def test_update_section_name_keeps_identifier(service: SectionService) -> None:
    section = _create(service)
    updated = service.update_section(section, SectionUpdateStruct(name="Media Library"))
    assert updated == Section(id=section.id, identifier="media", name="Media Library")


def test_update_section_identifier(service: SectionService) -> None:
    section = _create(service)
    updated = service.update_section(section, SectionUpdateStruct(identifier="assets"))
    assert updated.identifier == "assets"
    assert service.load_section_by_identifier("assets") == updated
    with pytest.raises(NotFoundError):
        service.load_section_by_identifier("media")


def test_update_section_to_own_identifier_is_allowed(service: SectionService) -> None:
    section = _create(service)
    updated = service.update_section(section, SectionUpdateStruct(name="Renamed", identifier="media"))
    assert updated.name == "Renamed"


def test_update_section_to_taken_identifier_raises(service: SectionService) -> None:
    _create(service, "Standard", "standard")
    media = _create(service)
    with pytest.raises(AlreadyExistsError):
        service.update_section(media, SectionUpdateStruct(identifier="standard"))


def test_update_missing_section_raises(service: SectionService) -> None:
    with pytest.raises(NotFoundError):
        service.update_section(Section(id=42, identifier="x", name="x"), SectionUpdateStruct(name="y"))


def test_update_rejects_invalid_values(service: SectionService) -> None:
    section = _create(service)
    with pytest.raises(InvalidArgumentValue):
        service.update_section(section, SectionUpdateStruct(name=5))  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentValue):
        service.update_section(Section(id="1", identifier="x", name="x"), SectionUpdateStruct())  # type: ignore[arg-type]


# ---- load ----


def test_load_missing_section_raises(service: SectionService) -> None:
    with pytest.raises(NotFoundError):
        service.load_section(1)
    with pytest.raises(NotFoundError):
        service.load_section_by_identifier("media")


def test_load_rejects_invalid_arguments(service: SectionService) -> None:
    with pytest.raises(InvalidArgumentValue):
        service.load_section("1")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentValue):
        service.load_section_by_identifier(1)  # type: ignore[arg-type]


def test_load_sections(service: SectionService) -> None:
    assert service.load_sections() == []
    standard = _create(service, "Standard", "standard")
    media = _create(service)
    assert service.load_sections() == [standard, media]


# ---- assignments and delete ----


def test_assign_section_counts_contents(service: SectionService) -> None:
    section = _create(service)
    service.assign_section(ContentInfo(content_id=10), section)
    service.assign_section(ContentInfo(content_id=11), section)
    assert service.count_assigned_contents(section) == 2


def test_assign_missing_section_raises(service: SectionService) -> None:
    with pytest.raises(NotFoundError):
        service.assign_section(ContentInfo(content_id=10), Section(id=7, identifier="x", name="x"))


def test_assign_checks_content_through_loader(handler: InMemorySectionHandler) -> None:
    service = SectionService(handler, InMemoryContentInfoLoader([10]))
    section = _create(service)

    service.assign_section(ContentInfo(content_id=10), section)
    assert handler.section_of(10) == section.id
    with pytest.raises(NotFoundError):
        service.assign_section(ContentInfo(content_id=11), section)
    assert service.count_assigned_contents(section) == 1


def test_assign_rejects_invalid_content_id(service: SectionService) -> None:
    section = _create(service)
    with pytest.raises(InvalidArgumentValue) as excinfo:
        service.assign_section(ContentInfo(content_id="10"), section)  # type: ignore[arg-type]
    assert excinfo.value.argument_name == "content_id"


def test_delete_section(service: SectionService) -> None:
    section = _create(service)
    service.delete_section(section)
    with pytest.raises(NotFoundError):
        service.load_section(section.id)


def test_delete_missing_section_raises(service: SectionService) -> None:
    with pytest.raises(NotFoundError):
        service.delete_section(Section(id=3, identifier="x", name="x"))


def test_delete_assigned_section_raises_bad_state(service: SectionService) -> None:
    section = _create(service)
    service.assign_section(ContentInfo(content_id=10), section)

    with pytest.raises(BadStateError):
        service.delete_section(section)
    assert service.load_section(section.id) == section


def test_delete_after_unassigning_all_contents(service: SectionService, handler: InMemorySectionHandler) -> None:
    section = _create(service)
    service.assign_section(ContentInfo(content_id=10), section)
    service.assign_section(ContentInfo(content_id=11), section)

    handler.unassign(10)
    handler.unassign(11)
    service.delete_section(section)
    assert service.load_sections() == []


def test_delete_after_reassigning_contents(service: SectionService) -> None:
    media = _create(service)
    standard = _create(service, "Standard", "standard")
    service.assign_section(ContentInfo(content_id=10), media)
    service.assign_section(ContentInfo(content_id=10), standard)

    service.delete_section(media)
    assert service.load_sections() == [standard]
