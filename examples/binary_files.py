"""IOService with the in-memory and file handlers, plus SectionService."""

import tempfile
from pathlib import Path

from contentkit import (
    ContentInfo,
    FileIOHandler,
    InMemoryIOHandler,
    InMemorySectionHandler,
    IOService,
    IOSettings,
    SectionCreateStruct,
    SectionService,
)

# ---- IOService + InMemoryIOHandler ----
# Best for development, testing, and short-lived processes.

with tempfile.TemporaryDirectory() as tmpdir:
    sample = Path(tmpdir) / "photo.png"
    sample.write_bytes(b"\x89PNG fake image")

    service = IOService(InMemoryIOHandler())
    struct = service.new_binary_create_struct_from_local_file(sample)
    binary_file = service.create_binary_file(struct)
    print(f"[InMemory] id={binary_file.id[:8]}..., uri={binary_file.uri}, mime_type={binary_file.mime_type}")
    print(f"  get_file_contents() = {service.get_file_contents(binary_file)!r}")

    service.delete_binary_file(binary_file)
    print(f"  load_binary_file() after delete = {service.load_binary_file(binary_file.id)}")

# ---- IOService + FileIOHandler ----
# Persists payloads and metadata sidecars under a root directory.

with tempfile.TemporaryDirectory() as tmpdir:
    upload_dir = Path(tmpdir) / "uploads"
    upload_dir.mkdir()
    tmp_upload = upload_dir / "phpA1b2C3"
    tmp_upload.write_bytes(b"uploaded report")

    service = IOService(FileIOHandler(Path(tmpdir) / "storage"), IOSettings(upload_dir=upload_dir))
    struct = service.new_binary_create_struct_from_uploaded_file(
        {"tmp_name": str(tmp_upload), "type": "text/plain", "name": "report.txt", "size": 15}
    )
    binary_file = service.create_binary_file(struct)
    print(f"\n[File] original_file={binary_file.original_file}, size={binary_file.size}")

    reopened = IOService(FileIOHandler(Path(tmpdir) / "storage"))
    print(f"  reopened load_binary_file() = {reopened.load_binary_file(binary_file.id) == binary_file}")

# ---- SectionService ----

sections = SectionService(InMemorySectionHandler())
media = sections.create_section(SectionCreateStruct(name="Media", identifier="media"))
sections.assign_section(ContentInfo(content_id=42), media)
print(f"\n[Section] {media.identifier}: assigned contents = {sections.count_assigned_contents(media)}")
