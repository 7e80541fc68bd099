"""The ``out`` command: run a script on a remote host over SSH."""

import asyncio
import logging
from typing import IO, Any

from ssh_resource.commands.base import read_request, write_response
from ssh_resource.config import Config
from ssh_resource.errors import CommandExecutionError, ExecutionError
from ssh_resource.models import OutRequest, OutResponse
from ssh_resource.services.executor import RelaySink, execute
from ssh_resource.services.version import build_version

logger = logging.getLogger(__name__)


def out_command(
    stdin: IO[Any],
    stdout: IO[str],
    stderr: IO[str],
    config: Config | None = None,
) -> None:
    """Run the requested script and report the new version.

    Remote output is relayed to ``stderr`` line by line as it arrives, each
    line tagged ``STDOUT:`` or ``STDERR:``. Only after the script exits
    successfully is the response document written to ``stdout``.

    Args:
        stdin: Stream holding the request document
        stdout: Stream receiving the response document
        stderr: Stream receiving relayed remote output
        config: Resource settings (read from the environment if omitted)

    Raises:
        RequestParseError: If the request cannot be decoded
        CommandExecutionError: If authentication or execution fails
    """
    if config is None:
        config = Config.from_env()

    request = read_request(stdin, OutRequest)
    sink = RelaySink(stderr)

    try:
        result = asyncio.run(
            execute(
                request.source,
                request.params,
                sink,
                connect_timeout=config.connect_timeout,
                known_hosts=config.known_hosts,
            )
        )
    except ExecutionError as e:
        logger.debug("Execution failed: %s: %s", type(e).__name__, e)
        raise CommandExecutionError(e) from e

    logger.debug("Relayed %d line(s) of remote output", sink.lines_written)
    response = OutResponse(version=build_version(result.completed_at))
    write_response(stdout, response.to_dict())
