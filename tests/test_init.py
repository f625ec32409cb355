"""Tests for the contentkit package surface."""

import importlib.metadata

import pytest

import contentkit
from contentkit import io as contentkit_io
from contentkit import section as contentkit_section


def _missing_metadata(_: str) -> str:
    msg = "contentkit is not installed"
    raise importlib.metadata.PackageNotFoundError(msg)


@pytest.mark.parametrize(
    ("version_lookup", "expected"),
    [
        (lambda name: "2.0.1" if name == "contentkit" else "wrong-package", "2.0.1"),
        (_missing_metadata, "0.0.0+unknown"),
    ],
)
def test_detect_version(monkeypatch: pytest.MonkeyPatch, version_lookup: object, expected: str) -> None:
    monkeypatch.setattr(contentkit.importlib_metadata, "version", version_lookup)
    assert contentkit._detect_version() == expected


def test_version_is_a_string() -> None:
    assert isinstance(contentkit.__version__, str)
    assert contentkit.__version__


@pytest.mark.parametrize("module", [contentkit, contentkit_io, contentkit_section])
def test_all_names_resolve(module: object) -> None:
    exported = module.__all__  # type: ignore[attr-defined]
    assert len(set(exported)) == len(exported)
    for name in exported:
        assert hasattr(module, name)


def test_services_are_reexported_at_top_level() -> None:
    assert contentkit.IOService is contentkit_io.IOService
    assert contentkit.SectionService is contentkit_section.SectionService
