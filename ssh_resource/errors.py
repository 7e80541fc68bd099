"""Error types for the SSH resource.

Two layers:

- Protocol errors (``RequestParseError``, ``CommandExecutionError``) are what
  the ``check``/``in``/``out`` commands raise. Their messages are fixed so the
  pipeline log is stable across failures.
- Execution errors (``ExecutionError`` subclasses) describe exactly what went
  wrong while authenticating or running the script. The ``out`` command wraps
  them in ``CommandExecutionError`` and keeps them as ``__cause__``.
"""


class ResourceError(Exception):
    """Base class for all errors raised by the resource."""

    message = "resource error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RequestParseError(ResourceError):
    """Standard input did not hold a valid request document."""

    message = "unable to parse JSON from standard input"

    def __init__(self, cause: Exception | None = None) -> None:
        """Initialize parse error.

        Args:
            cause: Decoder or validation error that triggered the failure
        """
        self.cause = cause
        super().__init__()


class CommandExecutionError(ResourceError):
    """Authenticating or running the remote script failed."""

    message = "unable to run SSH command"

    def __init__(self, cause: Exception | None = None) -> None:
        """Initialize execution error.

        Args:
            cause: The specific ``ExecutionError`` behind the failure
        """
        self.cause = cause
        super().__init__()


class ExecutionError(ResourceError):
    """Base class for failures while talking to the remote host."""

    message = "remote execution failed"


class MissingCredential(ExecutionError):
    """Neither a password nor a private key was supplied."""

    message = "no password or private key provided"


class InvalidCredential(ExecutionError):
    """The supplied private key could not be imported."""

    message = "unable to parse private key"

    def __init__(self, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__()


class AuthenticationFailed(ExecutionError):
    """The SSH handshake or authentication was rejected."""

    def __init__(self, host: str, cause: Exception | None = None) -> None:
        """Initialize authentication error.

        Args:
            host: ``user@hostname:port`` the connection was attempted to
            cause: Underlying transport or auth error
        """
        self.host = host
        self.cause = cause
        super().__init__(f"authentication failed for {host}")


class RemoteCommandFailed(ExecutionError):
    """The interpreter ran but exited with a non-zero status."""

    def __init__(self, exit_status: int) -> None:
        self.exit_status = exit_status
        super().__init__(f"remote command exited with status {exit_status}")


class ChannelError(ExecutionError):
    """The session channel failed while the script was running."""

    message = "SSH channel failed"

    def __init__(self, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__()


def format_error_tree(error: BaseException) -> str:
    """Render an error and its cause chain as an indented tree.

    Example:
        unable to run SSH command
        └─ authentication failed for root@localhost:22
           └─ Permission denied

    Args:
        error: Outermost exception

    Returns:
        Multi-line string, newline-terminated
    """
    lines = [_describe(error)]
    depth = 0
    seen = {id(error)}
    current = error.__cause__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        lines.append(f"{'   ' * depth}└─ {_describe(current)}")
        depth += 1
        current = current.__cause__
    return "\n".join(lines) + "\n"


def _describe(error: BaseException) -> str:
    """Get a one-line description of an exception."""
    if isinstance(error, ResourceError):
        return error.message
    text = str(error).strip()
    return text or type(error).__name__
