"""Connection and script parameters decoded from the request."""

from dataclasses import dataclass
from typing import Any


def _get_str(data: dict[str, Any], key: str) -> str:
    """Read an optional string field, treating null/missing as empty.

    Raises:
        TypeError: If the field holds a non-string JSON value
    """
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _require_object(data: Any, name: str) -> dict[str, Any]:
    """Ensure a decoded JSON value is an object."""
    if not isinstance(data, dict):
        raise TypeError(f"'{name}' must be a JSON object")
    return data


@dataclass(frozen=True)
class Source:
    """Where and as whom to connect."""

    host: str
    user: str
    password: str = ""
    private_key: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Source":
        """Decode the ``source`` object of a request.

        Empty strings are accepted here; credential usability is checked
        when authenticating.
        """
        data = _require_object(data, "source")
        return cls(
            host=_get_str(data, "host"),
            user=_get_str(data, "user"),
            password=_get_str(data, "password"),
            private_key=_get_str(data, "private_key"),
        )

    def __repr__(self) -> str:
        # Credentials never end up in logs or tracebacks.
        return (
            f"Source(host={self.host!r}, user={self.user!r}, "
            f"password={'***' if self.password else ''!r}, "
            f"private_key={'***' if self.private_key else ''!r})"
        )


@dataclass(frozen=True)
class Params:
    """What to run on the remote host."""

    interpreter: str
    script: str

    @classmethod
    def from_dict(cls, data: Any) -> "Params":
        """Decode the ``params`` object of a request."""
        data = _require_object(data, "params")
        return cls(
            interpreter=_get_str(data, "interpreter"),
            script=_get_str(data, "script"),
        )
