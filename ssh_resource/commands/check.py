"""The ``check`` command.

Versions only come into existence when ``out`` runs a script, so there is
never anything new to report.
"""

from typing import IO, Any

from ssh_resource.commands.base import read_request, write_response
from ssh_resource.models import CheckRequest


def check_command(stdin: IO[Any], stdout: IO[str], stderr: IO[str]) -> None:
    """Validate the request and report no new versions."""
    read_request(stdin, CheckRequest)
    write_response(stdout, [])
