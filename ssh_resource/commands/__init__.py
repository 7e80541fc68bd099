"""Resource protocol commands."""

from ssh_resource.commands.check import check_command
from ssh_resource.commands.get import in_command
from ssh_resource.commands.out import out_command

__all__ = [
    "check_command",
    "in_command",
    "out_command",
]
