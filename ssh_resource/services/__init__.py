"""Services for the SSH resource."""

from ssh_resource.services.auth import authenticate, select_credentials
from ssh_resource.services.executor import RelaySink, execute, run_script
from ssh_resource.services.version import build_version

__all__ = [
    "RelaySink",
    "authenticate",
    "build_version",
    "execute",
    "run_script",
    "select_credentials",
]
