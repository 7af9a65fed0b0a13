"""Tests for the BIG-IP client factory."""

from __future__ import annotations

import asyncio
import logging

import pytest

from bigip_provider.bigip import BigIPAuthError, BigIPConfigError, BigIPConnector, BigIPNode, SelfIP

pytestmark = pytest.mark.anyio


class _FakeSession:
    def __init__(self, self_ips: list[SelfIP] | None = None, error: Exception | None = None) -> None:
        self._self_ips = self_ips if self_ips is not None else []
        self._error = error
        self.closed = False

    async def self_ips(self) -> list[SelfIP]:
        if self._error is not None:
            raise self._error
        return self._self_ips

    async def close(self) -> None:
        self.closed = True


class _FakeBackend:
    def __init__(self, session: _FakeSession, login_error: Exception | None = None) -> None:
        self.session = session
        self.login_error = login_error
        self.calls: list[tuple[str, BigIPNode]] = []

    def new_session(self, config: BigIPNode) -> _FakeSession:
        self.calls.append(("basic", config))
        return self.session

    async def new_token_session(self, config: BigIPNode) -> _FakeSession:
        self.calls.append(("token", config))
        if self.login_error is not None:
            raise self.login_error
        return self.session


def _config(**overrides: str) -> BigIPNode:
    values = {"address": "10.1.1.1", "port": "443", "username": "admin", "password": "secret"}
    values.update(overrides)
    return BigIPNode(**values)


def _self_ip() -> SelfIP:
    return SelfIP(name="internal", address="10.10.0.1/24", vlan="/Common/internal")


@pytest.mark.parametrize("missing", ["address", "username", "password"])
async def test_missing_required_field_fails_without_connecting(missing: str) -> None:
    backend = _FakeBackend(_FakeSession([_self_ip()]))

    with pytest.raises(BigIPConfigError, match="requires address, username and password"):
        await BigIPConnector(_config(**{missing: ""}), backend=backend).client()

    assert backend.calls == []


async def test_basic_session_is_returned_when_liveness_check_passes(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    session = _FakeSession([_self_ip()])
    backend = _FakeBackend(session)

    client = await BigIPConnector(_config(), backend=backend).client()

    assert client is session
    assert [kind for kind, _ in backend.calls] == ["basic"]
    assert session.closed is False
    assert "Initializing BigIP connection" in caplog.text
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


async def test_login_reference_uses_token_session() -> None:
    session = _FakeSession([_self_ip()])
    backend = _FakeBackend(session)
    config = _config(login_reference="tmos")

    client = await BigIPConnector(config, backend=backend).client()

    assert client is session
    assert backend.calls == [("token", config)]


async def test_token_login_failure_is_logged_and_propagated(caplog: pytest.LogCaptureFixture) -> None:
    error = BigIPAuthError("Login failed with status 401")
    backend = _FakeBackend(_FakeSession(), login_error=error)

    with pytest.raises(BigIPAuthError) as excinfo:
        await BigIPConnector(_config(login_reference="ldap"), backend=backend).client()

    assert excinfo.value is error
    errors = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert [r.levelname for r in errors] == ["ERROR"]
    assert "Error creating New Token Session" in errors[0].getMessage()


async def test_empty_self_ip_list_only_warns(caplog: pytest.LogCaptureFixture) -> None:
    session = _FakeSession([])

    client = await BigIPConnector(_config(), backend=_FakeBackend(session)).client()

    assert client is session
    assert session.closed is False
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [r.getMessage() for r in warnings] == ["Could not validate connection to BigIP"]


async def test_liveness_check_failure_discards_session(caplog: pytest.LogCaptureFixture) -> None:
    error = ConnectionError("connection refused")
    session = _FakeSession(error=error)

    with pytest.raises(ConnectionError) as excinfo:
        await BigIPConnector(_config(), backend=_FakeBackend(session)).client()

    assert excinfo.value is error
    assert session.closed is True
    assert "could not have been validated" in caplog.text


async def test_injected_logger_receives_output(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="tests.bigip")
    logger = logging.getLogger("tests.bigip")

    await BigIPConnector(_config(), backend=_FakeBackend(_FakeSession([])), logger=logger).client()

    assert {r.name for r in caplog.records} == {"tests.bigip"}
    assert [r.levelname for r in caplog.records] == ["INFO", "WARNING"]


class _BlockingSession(_FakeSession):
    def __init__(self) -> None:
        super().__init__()
        self.started = asyncio.Event()

    async def self_ips(self) -> list[SelfIP]:
        self.started.set()
        await asyncio.Event().wait()
        return []


async def test_cancelled_liveness_check_closes_session() -> None:
    session = _BlockingSession()
    task = asyncio.create_task(BigIPConnector(_config(), backend=_FakeBackend(session)).client())
    await session.started.wait()

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert session.closed is True


async def test_connector_keeps_self_ips_from_liveness_check() -> None:
    connector = BigIPConnector(_config(), backend=_FakeBackend(_FakeSession([_self_ip()])))

    await connector.client()

    assert [ip.name for ip in connector.self_ips] == ["internal"]
