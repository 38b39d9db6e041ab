"""Tests for the transport layer and CLI."""

import socket

import pytest
from typer.testing import CliRunner

from shop import cli
from shop.core.config import settings
from shop.core.exceptions import BindFailure
from shop.server import bind_socket

runner = CliRunner()


@pytest.fixture
def listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock
    sock.close()


def test_bind_socket():
    sock = bind_socket("127.0.0.1", 0)
    try:
        assert sock.getsockname()[0] == "127.0.0.1"
    finally:
        sock.close()


def test_bind_failure_when_address_in_use(listener):
    port = listener.getsockname()[1]
    with pytest.raises(BindFailure) as exc_info:
        bind_socket("127.0.0.1", port)
    assert exc_info.value.address == ("127.0.0.1", port)
    assert f"127.0.0.1:{port}" in str(exc_info.value)


class TestCli:
    @pytest.fixture(autouse=True)
    def no_host_override(self, monkeypatch):
        monkeypatch.setattr(settings, "HOST", None)
        monkeypatch.setattr(settings, "INVENTORY", None)
        monkeypatch.setattr(cli, "configure_logging", lambda level, json_logs: None)

    @pytest.fixture
    def calls(self, monkeypatch):
        recorded = []

        def fake_serve(app, host, port, log_level="INFO"):
            recorded.append((app, host, port))

        monkeypatch.setattr(cli, "serve", fake_serve)
        return recorded

    @pytest.mark.parametrize("variant, host", [(1, "0.0.0.0"), (2, "0.0.0.0"), (3, "localhost")])
    def test_variant_default_host(self, calls, variant, host):
        result = runner.invoke(cli.app, ["--variant", str(variant), "--port", "8080"])
        assert result.exit_code == 0
        app, bound_host, port = calls[0]
        assert app.state.variant == variant
        assert (bound_host, port) == (host, 8080)

    def test_explicit_host(self, calls):
        result = runner.invoke(cli.app, ["--variant", "1", "--host", "127.0.0.1"])
        assert result.exit_code == 0
        assert calls[0][1] == "127.0.0.1"

    def test_bind_failure_exits_non_zero(self, monkeypatch):
        def failing_serve(app, host, port, log_level="INFO"):
            raise BindFailure((host, port), "address already in use")

        monkeypatch.setattr(cli, "serve", failing_serve)
        result = runner.invoke(cli.app, ["--variant", "3"])
        assert result.exit_code == 1

    def test_invalid_variant_rejected(self, calls):
        result = runner.invoke(cli.app, ["--variant", "4"])
        assert result.exit_code != 0
        assert calls == []
