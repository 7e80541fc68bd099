"""Version and metadata records emitted to the pipeline."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Version:
    """Version stamp of one successful execution."""

    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {"timestamp": self.timestamp}


@dataclass(frozen=True)
class MetadataField:
    """Single name/value metadata entry."""

    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


def version_from_dict(data: Any) -> dict[str, str]:
    """Decode an opaque version object passed back by the pipeline.

    ``check`` and ``in`` receive whatever version ``out`` emitted earlier,
    or nothing at all on the first run.

    Raises:
        TypeError: If the version is not an object of strings
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError("'version' must be a JSON object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise TypeError(f"version field '{key}' must be a string")
    return dict(data)
