"""Entry point for the SSH resource.

Concourse runs ``/opt/resource/check``, ``/opt/resource/in`` and
``/opt/resource/out``; when those are links to this program the command is
taken from the executable name. Otherwise it is the first argument:

    ssh-resource out /tmp/build/put < request.json
"""

import argparse
import logging
import os
import sys

from ssh_resource.commands import check_command, in_command, out_command
from ssh_resource.config import Config
from ssh_resource.errors import ResourceError, format_error_tree
from ssh_resource.utils.console import ColorfulFormatter

COMMANDS = ("check", "in", "out")

logger = logging.getLogger("ssh_resource")


def _configure_logging(config: Config) -> None:
    """Configure colorful logging for the ssh_resource package.

    Logs go to stderr next to the relayed remote output; stdout is reserved
    for the response document.
    """
    use_colors = config.log_colors and sys.stderr.isatty()

    resource_logger = logging.getLogger("ssh_resource")
    resource_logger.setLevel(getattr(logging, config.log_level, logging.WARNING))

    # Only add handler if not already configured
    if not resource_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        resource_logger.addHandler(handler)
        resource_logger.propagate = False

    # asyncssh logs every channel open/close at INFO
    asyncssh_logger = logging.getLogger("asyncssh")
    asyncssh_logger.setLevel(logging.WARNING)

    logging.getLogger().setLevel(logging.WARNING)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssh-resource",
        description="Concourse resource that runs a script on a remote host over SSH.",
    )
    parser.add_argument("command", choices=COMMANDS, help="resource command to run")
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="build directory passed by the pipeline (in/out)",
    )
    return parser


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Run one resource command against the process's standard streams.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``)
        prog: Program name used to detect ``check``/``in``/``out`` links

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]
    prog_name = os.path.basename(prog if prog is not None else sys.argv[0])
    if prog_name in COMMANDS:
        argv = [prog_name, *argv]

    args = _build_parser().parse_args(argv)

    config = Config.from_env()
    _configure_logging(config)

    try:
        if args.command == "check":
            check_command(sys.stdin, sys.stdout, sys.stderr)
        elif args.command == "in":
            in_command(sys.stdin, sys.stdout, sys.stderr, args.directory)
        else:
            out_command(sys.stdin, sys.stdout, sys.stderr, config)
    except ResourceError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        sys.stderr.write(format_error_tree(e))
        sys.stderr.flush()
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
