"""Utilities for the SSH resource."""

from ssh_resource.utils.console import ColorfulFormatter
from ssh_resource.utils.validation import DEFAULT_SSH_PORT, parse_host_address, validate_host

__all__ = [
    "ColorfulFormatter",
    "DEFAULT_SSH_PORT",
    "parse_host_address",
    "validate_host",
]
