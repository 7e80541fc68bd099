"""Tests for SSH authentication."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import asyncssh
import pytest

from ssh_resource.errors import AuthenticationFailed, InvalidCredential, MissingCredential
from ssh_resource.models import Source
from ssh_resource.services.auth import authenticate, select_credentials


@pytest.fixture(scope="module")
def private_key_text() -> str:
    """OpenSSH-encoded ed25519 private key."""
    key = asyncssh.generate_private_key("ssh-ed25519")
    return key.export_private_key().decode()


class TestSelectCredentials:
    """Credential selection."""

    def test_password_only(self) -> None:
        """Password auth disables keys and the agent."""
        source = Source(host="localhost", user="root", password="toor")

        options = select_credentials(source)

        assert options == {"client_keys": None, "password": "toor", "agent_path": None}

    def test_private_key(self, private_key_text: str) -> None:
        """A parsed key is passed as the only client key."""
        source = Source(host="localhost", user="root", private_key=private_key_text)

        options = select_credentials(source)

        assert len(options["client_keys"]) == 1
        assert isinstance(options["client_keys"][0], asyncssh.SSHKey)
        assert options["password"] is None
        assert options["agent_path"] is None

    def test_private_key_algorithm_logged_as_text(
        self, private_key_text: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The key algorithm is logged as a plain name."""
        source = Source(host="localhost", user="root", private_key=private_key_text)

        with caplog.at_level(logging.DEBUG, logger="ssh_resource.services.auth"):
            select_credentials(source)

        assert "Using private key authentication (ssh-ed25519)" in caplog.text
        assert "b'ssh-ed25519'" not in caplog.text

    def test_private_key_wins_over_password(self, private_key_text: str) -> None:
        """When both are given the key is used."""
        source = Source(
            host="localhost",
            user="root",
            password="toor",
            private_key=private_key_text,
        )

        options = select_credentials(source)

        assert options["password"] is None
        assert options["client_keys"]

    def test_malformed_private_key(self) -> None:
        """A key that cannot be imported is an invalid credential."""
        source = Source(host="localhost", user="root", private_key="not a key")

        with pytest.raises(InvalidCredential) as exc_info:
            select_credentials(source)

        assert exc_info.value.cause is not None
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_no_credentials(self) -> None:
        """Empty password and no key is a missing credential."""
        source = Source(host="localhost", user="root", password="")

        with pytest.raises(MissingCredential):
            select_credentials(source)


class TestAuthenticate:
    """Connection handshake."""

    @pytest.mark.asyncio
    async def test_connects_with_password(self) -> None:
        """Password source connects once with the parsed address."""
        source = Source(host="example.com:2222", user="deploy", password="secret")
        mock_conn = MagicMock()

        with patch("asyncssh.connect", new_callable=AsyncMock) as mock_connect:
            mock_connect.return_value = mock_conn

            conn = await authenticate(source, connect_timeout=5.0)

        assert conn is mock_conn
        mock_connect.assert_called_once_with(
            "example.com",
            port=2222,
            username="deploy",
            known_hosts=None,
            connect_timeout=5.0,
            client_keys=None,
            password="secret",
            agent_path=None,
        )

    @pytest.mark.asyncio
    async def test_default_port_and_known_hosts(self, tmp_path) -> None:
        """Port defaults to 22 and known_hosts is passed through."""
        known_hosts = tmp_path / "known_hosts"
        known_hosts.write_text("")
        source = Source(host="localhost", user="root", password="toor")

        with patch("asyncssh.connect", new_callable=AsyncMock) as mock_connect:
            await authenticate(source, known_hosts=str(known_hosts))

        kwargs = mock_connect.call_args.kwargs
        assert mock_connect.call_args.args == ("localhost",)
        assert kwargs["port"] == 22
        assert kwargs["known_hosts"] == str(known_hosts)
        assert kwargs["connect_timeout"] == 10.0

    @pytest.mark.asyncio
    async def test_missing_credential_never_connects(self) -> None:
        """No network attempt is made without credentials."""
        source = Source(host="localhost", user="root")

        with patch("asyncssh.connect", new_callable=AsyncMock) as mock_connect:
            with pytest.raises(MissingCredential):
                await authenticate(source)

        mock_connect.assert_not_called()

    @pytest.mark.asyncio
    async def test_permission_denied(self) -> None:
        """Rejected credentials become AuthenticationFailed with the cause."""
        source = Source(host="localhost", user="root", password="wrong")
        denied = asyncssh.PermissionDenied("Permission denied")

        with patch("asyncssh.connect", new_callable=AsyncMock, side_effect=denied):
            with pytest.raises(AuthenticationFailed) as exc_info:
                await authenticate(source)

        error = exc_info.value
        assert error.host == "root@localhost:22"
        assert error.cause is denied
        assert error.__cause__ is denied
        assert "root@localhost:22" in str(error)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "failure",
        [ConnectionRefusedError("refused"), asyncio.TimeoutError()],
    )
    async def test_transport_failures(self, failure: Exception) -> None:
        """Refused and timed-out connections fail authentication."""
        source = Source(host="localhost", user="root", password="toor")

        with patch("asyncssh.connect", new_callable=AsyncMock, side_effect=failure):
            with pytest.raises(AuthenticationFailed) as exc_info:
                await authenticate(source)

        assert exc_info.value.cause is failure

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("host", "user"),
        [("", "root"), ("localhost:notaport", "root"), ("localhost:70000", "root"), ("localhost", "")],
    )
    async def test_invalid_address(self, host: str, user: str) -> None:
        """Bad host, port, or user fails before any connection attempt."""
        source = Source(host=host, user=user, password="toor")

        with patch("asyncssh.connect", new_callable=AsyncMock) as mock_connect:
            with pytest.raises(AuthenticationFailed) as exc_info:
                await authenticate(source)

        assert isinstance(exc_info.value.cause, ValueError)
        mock_connect.assert_not_called()
