"""Shared request/response plumbing for the resource commands."""

import json
import logging
from typing import IO, Any, Protocol, TypeVar

from ssh_resource.errors import RequestParseError

logger = logging.getLogger(__name__)


class _Decodable(Protocol):
    @classmethod
    def from_dict(cls, data: Any) -> Any: ...


RequestT = TypeVar("RequestT", bound=_Decodable)


def read_request(stdin: IO[Any], model: type[RequestT]) -> RequestT:
    """Read all of stdin and decode it into a request model.

    Args:
        stdin: Text or binary stream holding one JSON document
        model: Request class providing ``from_dict``

    Returns:
        Decoded request

    Raises:
        RequestParseError: If the input is not valid JSON or has the wrong shape
    """
    raw = stdin.read()
    try:
        data = json.loads(raw)
        request = model.from_dict(data)
    except (ValueError, TypeError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        logger.debug("Rejected request: %s", e)
        raise RequestParseError(e) from e
    return request


def write_response(stdout: IO[str], payload: Any) -> None:
    """Write one JSON document followed by a newline."""
    stdout.write(json.dumps(payload) + "\n")
    stdout.flush()
