"""The ``in`` command.

Nothing is fetched: the requested version is echoed back so ``get`` steps
after a ``put`` succeed.
"""

import logging
from typing import IO, Any

from ssh_resource.commands.base import read_request, write_response
from ssh_resource.models import InRequest, InResponse

logger = logging.getLogger(__name__)


def in_command(
    stdin: IO[Any],
    stdout: IO[str],
    stderr: IO[str],
    destination: str | None = None,
) -> None:
    """Echo the requested version with empty metadata.

    Args:
        stdin: Stream holding the request document
        stdout: Stream receiving the response document
        stderr: Unused
        destination: Output directory given by the pipeline, left untouched
    """
    request = read_request(stdin, InRequest)
    logger.debug("in: version=%s destination=%s", request.version, destination)
    write_response(stdout, InResponse(version=request.version).to_dict())
