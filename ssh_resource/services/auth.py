"""SSH authentication: credential selection and connection handshake."""

import asyncio
import logging
from typing import Any

import asyncssh

from ssh_resource.errors import AuthenticationFailed, InvalidCredential, MissingCredential
from ssh_resource.models import Source
from ssh_resource.utils.validation import parse_host_address

logger = logging.getLogger(__name__)


def select_credentials(source: Source) -> dict[str, Any]:
    """Build the asyncssh auth options for a source.

    A private key wins over a password. Whichever is chosen, the other
    method is switched off, and the local ssh-agent and default key files
    are never consulted.

    Args:
        source: Decoded resource source

    Returns:
        Keyword arguments for ``asyncssh.connect``

    Raises:
        InvalidCredential: If the private key cannot be imported
        MissingCredential: If no usable password or key is present
    """
    if source.private_key.strip():
        try:
            key = asyncssh.import_private_key(source.private_key)
        except (asyncssh.KeyImportError, ValueError) as e:
            raise InvalidCredential(e) from e
        logger.debug("Using private key authentication (%s)", key.get_algorithm())
        return {"client_keys": [key], "password": None, "agent_path": None}

    if source.password:
        logger.debug("Using password authentication")
        return {"client_keys": None, "password": source.password, "agent_path": None}

    raise MissingCredential()


async def authenticate(
    source: Source,
    *,
    connect_timeout: float = 10.0,
    known_hosts: str | None = None,
) -> asyncssh.SSHClientConnection:
    """Open one authenticated SSH connection.

    A single attempt is made. The caller owns the returned connection and
    must close it.

    Args:
        source: Decoded resource source
        connect_timeout: Seconds allowed for connect and authentication
        known_hosts: Path to known_hosts file, or None to disable verification

    Returns:
        Active SSH connection

    Raises:
        MissingCredential: If no usable password or key is present
        InvalidCredential: If the private key cannot be imported
        AuthenticationFailed: If the address is invalid or the host rejects us
    """
    try:
        hostname, port = parse_host_address(source.host)
        if not source.user:
            raise ValueError("User cannot be empty")
    except ValueError as e:
        raise AuthenticationFailed(f"{source.user}@{source.host}", e) from e

    target = f"{source.user}@{hostname}:{port}"
    credentials = select_credentials(source)

    if known_hosts is None:
        logger.info(
            "SSH host key verification DISABLED for %s. "
            "Set SSH_RESOURCE_KNOWN_HOSTS to a known_hosts file to enable it.",
            target,
        )

    logger.info("Opening SSH connection to %s", target)
    try:
        conn = await asyncssh.connect(
            hostname,
            port=port,
            username=source.user,
            known_hosts=known_hosts,
            connect_timeout=connect_timeout,
            **credentials,
        )
    except (asyncssh.Error, OSError, asyncio.TimeoutError) as e:
        logger.info("SSH connection to %s failed: %s", target, e)
        raise AuthenticationFailed(target, e) from e

    logger.info("SSH connection established to %s", target)
    return conn
