"""Remote script execution with live output relay."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, TextIO

import asyncssh

from ssh_resource.errors import ChannelError, RemoteCommandFailed
from ssh_resource.models import ExecutionResult, Params, Source
from ssh_resource.services.auth import authenticate

if TYPE_CHECKING:
    from collections.abc import AsyncIterable

logger = logging.getLogger(__name__)


class RelaySink:
    """Serialized writer for tagged remote output lines.

    Each line is written together with its tag and newline in one call,
    so lines from the two relays never interleave mid-line.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = asyncio.Lock()
        self.lines_written = 0

    async def write_line(self, tag: str, line: str) -> None:
        """Write one remote line to the local stream.

        Args:
            tag: Originating stream name, ``STDOUT`` or ``STDERR``
            line: Line as received, with or without its trailing newline
        """
        if not line.endswith("\n"):
            line += "\n"
        async with self._lock:
            self._stream.write(f"{tag}: {line}")
            self._stream.flush()
            self.lines_written += 1


async def _relay(reader: "AsyncIterable[str]", tag: str, sink: RelaySink) -> None:
    """Forward every line from a remote stream until EOF."""
    async for line in reader:
        # SSHReader yields "" once EOF arrives mid-readline
        if not line:
            break
        await sink.write_line(tag, line)
    logger.debug("Remote %s closed", tag)


async def run_script(
    conn: asyncssh.SSHClientConnection,
    params: Params,
    sink: RelaySink,
) -> ExecutionResult:
    """Run a script through its interpreter on an open connection.

    The interpreter is started as the remote command and the script is fed
    to it on stdin, followed by EOF. Remote stdout and stderr are relayed to
    the sink concurrently while the process runs.

    Args:
        conn: Authenticated SSH connection
        params: Interpreter and script
        sink: Destination for relayed output

    Returns:
        ExecutionResult stamped with the completion time

    Raises:
        RemoteCommandFailed: If the script exits non-zero or is killed
        ChannelError: If the channel fails or closes without an exit status
    """
    if not params.interpreter.strip():
        cause = ValueError("Interpreter cannot be empty")
        raise ChannelError(cause) from cause

    logger.info("Running script via %s (%d bytes)", params.interpreter, len(params.script))
    try:
        process = await conn.create_process(
            params.interpreter,
            encoding="utf-8",
            errors="replace",
        )
    except (asyncssh.Error, OSError) as e:
        raise ChannelError(e) from e

    try:
        process.stdin.write(params.script)
        process.stdin.write_eof()

        relays = [
            asyncio.create_task(_relay(process.stdout, "STDOUT", sink)),
            asyncio.create_task(_relay(process.stderr, "STDERR", sink)),
        ]
        try:
            await asyncio.gather(*relays)
        finally:
            for task in relays:
                task.cancel()

        completed = await process.wait()
    except (asyncssh.Error, OSError) as e:
        logger.info("Channel failed while running script: %s", e)
        raise ChannelError(e) from e
    finally:
        process.close()
        await process.wait_closed()

    exit_status = completed.returncode
    if exit_status is None:
        cause = RuntimeError("channel closed without an exit status")
        raise ChannelError(cause) from cause

    logger.info("Remote script finished (exit_status=%d)", exit_status)
    if exit_status != 0:
        raise RemoteCommandFailed(exit_status)

    return ExecutionResult(completed_at=datetime.now(timezone.utc), exit_status=exit_status)


async def execute(
    source: Source,
    params: Params,
    sink: RelaySink,
    *,
    connect_timeout: float = 10.0,
    known_hosts: str | None = None,
) -> ExecutionResult:
    """Authenticate, run the script, and release the connection.

    Args:
        source: Connection parameters
        params: Interpreter and script
        sink: Destination for relayed output
        connect_timeout: Seconds allowed for connect and authentication
        known_hosts: Path to known_hosts file, or None to disable verification

    Returns:
        ExecutionResult of the successful run

    Raises:
        ExecutionError: Any authentication or execution failure
    """
    conn = await authenticate(
        source,
        connect_timeout=connect_timeout,
        known_hosts=known_hosts,
    )
    try:
        return await run_script(conn, params, sink)
    finally:
        conn.close()
        await conn.wait_closed()
        logger.debug("SSH connection closed")
