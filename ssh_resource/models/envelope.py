"""Request and response envelopes of the resource protocol."""

from dataclasses import dataclass, field
from typing import Any

from ssh_resource.models.source import Params, Source, _require_object
from ssh_resource.models.version import MetadataField, Version, version_from_dict


@dataclass(frozen=True)
class OutRequest:
    """Request read by ``out``."""

    source: Source
    params: Params

    @classmethod
    def from_dict(cls, data: Any) -> "OutRequest":
        """Decode a request document.

        Raises:
            TypeError: If the document or one of its objects has the wrong shape
        """
        data = _require_object(data, "request")
        return cls(
            source=Source.from_dict(data.get("source")),
            params=Params.from_dict(data.get("params")),
        )


@dataclass(frozen=True)
class OutResponse:
    """Response written by ``out`` after the script succeeded."""

    version: Version
    metadata: list[MetadataField] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version.to_dict(),
            "metadata": [m.to_dict() for m in self.metadata],
        }


@dataclass(frozen=True)
class CheckRequest:
    """Request read by ``check``."""

    source: Source
    version: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "CheckRequest":
        data = _require_object(data, "request")
        return cls(
            source=Source.from_dict(data.get("source", {})),
            version=version_from_dict(data.get("version")),
        )


@dataclass(frozen=True)
class InRequest:
    """Request read by ``in``."""

    source: Source
    version: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "InRequest":
        data = _require_object(data, "request")
        params = data.get("params") or {}
        return cls(
            source=Source.from_dict(data.get("source", {})),
            version=version_from_dict(data.get("version")),
            params=_require_object(params, "params"),
        )


@dataclass(frozen=True)
class InResponse:
    """Response written by ``in``: the requested version echoed back."""

    version: dict[str, str]
    metadata: list[MetadataField] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": dict(self.version),
            "metadata": [m.to_dict() for m in self.metadata],
        }
