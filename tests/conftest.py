"""Shared fixtures: an in-memory SafeTech valve behind a fake aiohttp session."""
from __future__ import annotations

import json
from typing import Any
from urllib.parse import unquote, urlsplit

import pytest

from custom_components.syrsafetech.api import SyrSafeTechClient
from custom_components.syrsafetech.device import SyrSafeTechDevice

HOST = "192.168.1.50"


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as a context manager."""

    def __init__(self, status: int, body: str, error: BaseException | None = None):
        self.status = status
        self._body = body
        self._error = error
        self.released = False

    async def __aenter__(self) -> FakeResponse:
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.released = True

    async def text(self) -> str:
        return self._body


class FakeSafeTech:
    """Simulated valve answering the local API from in-memory state.

    Paths in `overrides` bypass the simulation: the value is either a raw
    body string, a (status, body) tuple or an exception to raise.
    """

    def __init__(self) -> None:
        self.shutoff = 1
        self.selected = 1
        self.count = 8
        self.active = {1}
        self.names = {n: f"Profile {n}" for n in range(1, 9)}
        self.attributes: dict[str, str] = {}
        self.overrides: dict[str, Any] = {}
        self.requests: list[str] = []
        self.timeouts: list[Any] = []

    def get(self, url: str, timeout: Any = None) -> FakeResponse:
        parts = urlsplit(url)
        assert parts.netloc == f"{HOST}:5333"
        assert parts.path.startswith("/safe-tec/")
        path = unquote(parts.path[len("/safe-tec"):])

        self.requests.append(path)
        self.timeouts.append(timeout)

        if path in self.overrides:
            override = self.overrides[path]
            if isinstance(override, BaseException):
                return FakeResponse(0, "", error=override)
            if isinstance(override, tuple):
                return FakeResponse(*override)
            return FakeResponse(200, override)

        return FakeResponse(200, json.dumps(self._answer(path)))

    def _answer(self, path: str) -> dict[str, Any]:
        action, mnemonic, *rest = path.strip("/").split("/", 2)
        parameter = rest[0] if rest else None

        if action == "get":
            key = "getPRN" if mnemonic == "PRn" else f"get{mnemonic}"
            return {key: self._read(mnemonic)}

        if mnemonic == "AB":
            self.shutoff = int(parameter)
            return {f"setAB{parameter}": "OK"}
        if mnemonic == "PRF":
            self.selected = int(parameter)
            return {f"setPRF{parameter}": "OK"}
        if mnemonic.startswith("PA"):
            profile = int(mnemonic[2:])
            if parameter == "1":
                self.active.add(profile)
            else:
                self.active.discard(profile)
            return {f"setPA{profile}{parameter}": "OK"}
        if mnemonic.startswith("PN"):
            self.names[int(mnemonic[2:])] = parameter
            return {f"set{mnemonic}/{parameter}": "OK"}
        return {f"set{mnemonic}{parameter}": "ERROR"}

    def _read(self, mnemonic: str) -> Any:
        if mnemonic == "AB":
            return self.shutoff
        if mnemonic == "PRF":
            return self.selected
        if mnemonic == "PRn":
            return self.count
        if mnemonic.startswith("PA"):
            return 1 if int(mnemonic[2:]) in self.active else 0
        if mnemonic.startswith("PN"):
            return self.names[int(mnemonic[2:])]
        return self.attributes.get(mnemonic, "0")

    def sets(self) -> list[str]:
        return [path for path in self.requests if path.startswith("/set/")]


class Recorder:
    """Collects what the device pushes to its host sinks."""

    def __init__(self) -> None:
        self.states: dict[str, Any] = {}
        self.updates: list[tuple[str, Any]] = []
        self.statuses: list[tuple[Any, str | None]] = []

    def update_state(self, channel: str, value: Any) -> None:
        self.states[channel] = value
        self.updates.append((channel, value))

    def update_status(self, status: Any, detail: str | None) -> None:
        self.statuses.append((status, detail))


@pytest.fixture
def safetech() -> FakeSafeTech:
    return FakeSafeTech()


@pytest.fixture
def client(safetech: FakeSafeTech) -> SyrSafeTechClient:
    return SyrSafeTechClient(safetech, HOST)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def device(client: SyrSafeTechClient, recorder: Recorder) -> SyrSafeTechDevice:
    return SyrSafeTechDevice(client, recorder.update_state, recorder.update_status)


@pytest.fixture
def host() -> str:
    return HOST
