"""Host address validation utilities."""

from typing import Final

DEFAULT_SSH_PORT: Final[int] = 22

# Characters that have no business in a host name
SUSPICIOUS_CHARS: Final[list[str]] = ["/", "\\", ";", "&", "|", "$", "`", " ", "\n", "\r", "\x00"]


def validate_host(host: str) -> str:
    """Validate a host name.

    Args:
        host: The host name to validate

    Returns:
        Validated host name

    Raises:
        ValueError: If host name is invalid
    """
    if not host:
        raise ValueError("Host cannot be empty")

    if len(host) > 253:
        raise ValueError(f"Host name too long: {len(host)} chars")

    for char in SUSPICIOUS_CHARS:
        if char in host:
            raise ValueError(f"Host contains invalid characters: {host!r}")

    return host


def parse_host_address(address: str) -> tuple[str, int]:
    """Split ``hostname[:port]`` into host and port.

    Accepts ``host``, ``host:port``, ``[v6addr]`` and ``[v6addr]:port``.
    A bare IPv6 literal without brackets is taken as a host with no port.

    Args:
        address: Address string from the resource source

    Returns:
        Tuple of (hostname, port)

    Raises:
        ValueError: If the address or port is invalid
    """
    address = address.strip()
    if not address:
        raise ValueError("Host cannot be empty")

    if address.startswith("["):
        end = address.find("]")
        if end == -1:
            raise ValueError(f"Unterminated IPv6 address: {address}")
        hostname = address[1:end]
        rest = address[end + 1 :]
        if rest and not rest.startswith(":"):
            raise ValueError(f"Invalid host address: {address}")
        port_text = rest[1:] if rest else None
    elif address.count(":") == 1:
        hostname, port_text = address.split(":")
    else:
        hostname, port_text = address, None

    port = DEFAULT_SSH_PORT
    if port_text is not None:
        try:
            port = int(port_text)
        except ValueError as e:
            raise ValueError(f"Invalid port: {port_text!r}") from e
        if not 0 < port < 65536:
            raise ValueError(f"Port out of range: {port}")

    return validate_host(hostname), port
