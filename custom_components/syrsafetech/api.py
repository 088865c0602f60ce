"""Local HTTP/JSON API client for SYR SafeTech Connect."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import json
import logging
import re
from typing import Any
from urllib.parse import quote

import aiohttp

from .const import (
    ACK_OK,
    API_PATH,
    API_PORT,
    INVALID_INT,
    INVALID_TEXT,
    MNEMONIC_PROFILE_AVAILABILITY,
    MNEMONIC_PROFILE_COUNT,
    MNEMONIC_PROFILE_NAME,
    MNEMONIC_SELECTED_PROFILE,
    MNEMONIC_SHUTOFF,
    PROFILE_ACTIVE,
    PROFILE_ATTRIBUTE_CHANNELS,
    PROFILE_INACTIVE,
    PROFILE_MAX,
    PROFILE_MIN,
    REQUEST_TIMEOUT,
    SHUTOFF_STATES,
)

_LOGGER = logging.getLogger(__name__)

_INTEGER = re.compile(r"\s*-?\d+\s*", re.ASCII)


class SyrSafeTechError(Exception):
    """Base error for SYR SafeTech communication."""


class SyrSafeTechConnectionError(SyrSafeTechError):
    """Request failed or the device answered with a non-200 status."""


class SyrSafeTechTimeoutError(SyrSafeTechConnectionError):
    """Request did not complete within the timeout."""


class Action(str, Enum):
    """Request action understood by the device."""

    GET = "get"
    SET = "set"


def _build_response_keys() -> dict[tuple[Action, str, str | None], str]:
    """Build the (action, mnemonic, parameter) -> response key table."""
    keys: dict[tuple[Action, str, str | None], str] = {}

    keys[(Action.GET, MNEMONIC_SHUTOFF, None)] = "getAB"
    for state in SHUTOFF_STATES:
        keys[(Action.SET, MNEMONIC_SHUTOFF, str(state))] = f"setAB{state}"

    keys[(Action.GET, MNEMONIC_SELECTED_PROFILE, None)] = "getPRF"
    # The profile count request uses a lower-case n, the answer does not
    keys[(Action.GET, MNEMONIC_PROFILE_COUNT, None)] = "getPRN"

    profile_codes = [MNEMONIC_PROFILE_AVAILABILITY, MNEMONIC_PROFILE_NAME]
    profile_codes.extend(PROFILE_ATTRIBUTE_CHANNELS.values())

    for profile in range(PROFILE_MIN, PROFILE_MAX + 1):
        keys[(Action.SET, MNEMONIC_SELECTED_PROFILE, str(profile))] = f"setPRF{profile}"
        for code in profile_codes:
            keys[(Action.GET, f"{code}{profile}", None)] = f"get{code}{profile}"
        for status in (PROFILE_INACTIVE, PROFILE_ACTIVE):
            keys[
                (Action.SET, f"{MNEMONIC_PROFILE_AVAILABILITY}{profile}", str(status))
            ] = f"setPA{profile}{status}"

    return keys


RESPONSE_KEYS = _build_response_keys()


@dataclass(frozen=True)
class DeviceCommand:
    """A single request to the device."""

    action: Action
    mnemonic: str
    parameter: str | None = None

    @property
    def path(self) -> str:
        """Return the URL path below the API root."""
        path = f"/{self.action.value}/{self.mnemonic}"
        if self.parameter is not None:
            path += f"/{quote(self.parameter, safe='')}"
        return path

    @property
    def is_profile_name_set(self) -> bool:
        return self.action is Action.SET and self.mnemonic.startswith(
            MNEMONIC_PROFILE_NAME
        )

    @property
    def response_key(self) -> str:
        """Return the JSON key the device answers this command with."""
        key = RESPONSE_KEYS.get((self.action, self.mnemonic, self.parameter))
        if key is not None:
            return key
        if self.is_profile_name_set:
            # Free-form names can't be tabulated
            return f"set{self.mnemonic}/{self.parameter}"
        raise ValueError(f"Unsupported command: {self.action.value} {self.mnemonic}")


def get_shutoff() -> DeviceCommand:
    return DeviceCommand(Action.GET, MNEMONIC_SHUTOFF)


def set_shutoff(state: int) -> DeviceCommand:
    return DeviceCommand(Action.SET, MNEMONIC_SHUTOFF, str(state))


def get_selected_profile() -> DeviceCommand:
    return DeviceCommand(Action.GET, MNEMONIC_SELECTED_PROFILE)


def set_selected_profile(profile: int) -> DeviceCommand:
    return DeviceCommand(Action.SET, MNEMONIC_SELECTED_PROFILE, str(profile))


def get_profile_count() -> DeviceCommand:
    return DeviceCommand(Action.GET, MNEMONIC_PROFILE_COUNT)


def get_profile_availability(profile: int) -> DeviceCommand:
    return DeviceCommand(Action.GET, f"{MNEMONIC_PROFILE_AVAILABILITY}{profile}")


def set_profile_availability(profile: int, status: int) -> DeviceCommand:
    return DeviceCommand(
        Action.SET, f"{MNEMONIC_PROFILE_AVAILABILITY}{profile}", str(status)
    )


def get_profile_name(profile: int) -> DeviceCommand:
    return DeviceCommand(Action.GET, f"{MNEMONIC_PROFILE_NAME}{profile}")


def set_profile_name(profile: int, name: str) -> DeviceCommand:
    return DeviceCommand(Action.SET, f"{MNEMONIC_PROFILE_NAME}{profile}", name)


def get_profile_attribute(code: str, profile: int) -> DeviceCommand:
    return DeviceCommand(Action.GET, f"{code}{profile}")


def build_url(host: str, command: DeviceCommand) -> str:
    """Return the full request URL for a command."""
    return f"http://{host}:{API_PORT}{API_PATH}{command.path}"


def _load_object(response: str) -> dict[str, Any] | None:
    """Decode a response that must be a single JSON object."""
    try:
        payload = json.loads(response)
    except (TypeError, ValueError):
        _LOGGER.warning("Unable to parse response as a JSON object: %s", response)
        return None
    if not isinstance(payload, dict):
        _LOGGER.warning("Unable to parse response as a JSON object: %s", response)
        return None
    return payload


def _is_ack(payload: dict[str, Any], key: str) -> bool:
    return key in payload and payload[key] == ACK_OK


def parse_int(response: str, command: DeviceCommand) -> int:
    """Return the integer carried by a response, or INVALID_INT."""
    payload = _load_object(response)
    if payload is None:
        return INVALID_INT

    key = command.response_key
    if command.action is Action.SET:
        if _is_ack(payload, key):
            return int(command.parameter)
        _LOGGER.warning("Command %s was not acknowledged: %s", key, response)
        return INVALID_INT

    if key not in payload:
        _LOGGER.warning("Response has no %s value: %s", key, response)
        return INVALID_INT

    value = payload[key]
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value):
        return int(value)

    _LOGGER.warning("Unexpected %s value: %s", key, response)
    return INVALID_INT


def parse_text(
    response: str, command: DeviceCommand, default: str | None = INVALID_TEXT
) -> str | None:
    """Return the text carried by a response, or default when there is none."""
    payload = _load_object(response)
    if payload is None:
        return default

    key = command.response_key
    if command.action is Action.SET:
        if _is_ack(payload, key) and command.parameter:
            return command.parameter
        _LOGGER.warning("Command %s was not acknowledged: %s", key, response)
        return default

    value = payload.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)

    _LOGGER.warning("Response has no %s value: %s", key, response)
    return default


class SyrSafeTechClient:
    """Talk to one SafeTech device over its local API."""

    def __init__(self, session: aiohttp.ClientSession, host: str) -> None:
        """Initialize the client with a session owned by the caller."""
        self._session = session
        self.host = host

    async def async_send(self, command: DeviceCommand) -> str:
        """Issue one request and return the raw response body.

        Raises SyrSafeTechTimeoutError when the device does not answer in
        time and SyrSafeTechConnectionError for any other transport failure
        or a non-200 status. No retries.
        """
        url = build_url(self.host, command)
        _LOGGER.debug("Sending request to URL: %s", url)

        try:
            async with self._session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT),
            ) as resp:
                if resp.status != 200:
                    raise SyrSafeTechConnectionError(
                        f"HTTP response status not OK: {resp.status}"
                    )
                return await resp.text()
        except TimeoutError as err:
            raise SyrSafeTechTimeoutError(
                f"No response from {self.host} within {REQUEST_TIMEOUT}s"
            ) from err
        except (aiohttp.ClientError, OSError) as err:
            raise SyrSafeTechConnectionError(
                f"Error communicating with {self.host}: {err}"
            ) from err

    async def async_get_int(self, command: DeviceCommand) -> int:
        """Send a command and parse an integer answer."""
        return parse_int(await self.async_send(command), command)

    async def async_get_text(
        self, command: DeviceCommand, default: str | None = INVALID_TEXT
    ) -> str | None:
        """Send a command and parse a text answer."""
        return parse_text(await self.async_send(command), command, default)
