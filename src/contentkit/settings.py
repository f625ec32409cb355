"""IOSettings: immutable configuration for IOService."""

import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from contentkit.errors import InvalidArgumentValue
from contentkit.validation import optional_path, require_non_empty_string

_KNOWN_KEYS = frozenset({"upload_dir", "default_mime_type"})


@dataclass(frozen=True, slots=True)
class IOSettings:
    """Recognized IOService options.

    - `upload_dir`: directory holding upload-transfer artifacts; a file only
      counts as an upload when it lives under this directory. ``None`` means
      the system temporary directory.
    - `default_mime_type`: mime type used when one cannot be guessed for a
      local file.
    """

    upload_dir: Path | None = None
    default_mime_type: str = "application/octet-stream"

    def __post_init__(self) -> None:
        """Normalize the upload directory into a Path."""
        object.__setattr__(
            self,
            "upload_dir",
            optional_path(self.upload_dir, field_name="upload_dir", what="IOSettings"),
        )
        require_non_empty_string(self.default_mime_type, field_name="default_mime_type", what="IOSettings")

    @property
    def effective_upload_dir(self) -> Path:
        """Return the upload directory, falling back to the system temp directory."""
        if self.upload_dir is not None:
            return self.upload_dir
        return Path(tempfile.gettempdir())

    def to_dict(self) -> dict[str, object]:
        """Serialize IOSettings to a plain dictionary."""
        return {
            "upload_dir": str(self.upload_dir) if self.upload_dir is not None else None,
            "default_mime_type": self.default_mime_type,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object]) -> "IOSettings":
        """Deserialize IOSettings from a plain dictionary, rejecting unknown options."""
        unknown = sorted(str(key) for key in value if key not in _KNOWN_KEYS)
        if unknown:
            raise InvalidArgumentValue("settings", unknown, "IOSettings")

        upload_dir = optional_path(value.get("upload_dir"), field_name="upload_dir", what="IOSettings")
        default_mime_type = value.get("default_mime_type", "application/octet-stream")
        return cls(
            upload_dir=upload_dir,
            default_mime_type=require_non_empty_string(
                default_mime_type, field_name="default_mime_type", what="IOSettings"
            ),
        )
