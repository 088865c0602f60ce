"""Channel command handling for a SYR SafeTech Connect valve.

Every channel command becomes one or more requests through the client, and
the results are pushed to the host through two sinks: one for channel values
and one for the device status. No channel state is kept here.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from functools import partial
import logging
from typing import Any

from . import api
from .api import SyrSafeTechClient, SyrSafeTechError, SyrSafeTechTimeoutError
from .const import (
    BOOLEAN_CHANNELS,
    CHANNEL_NUMBER_OF_PROFILES,
    CHANNEL_PROFILE_AVAILABILITY,
    CHANNEL_PROFILE_NAME,
    CHANNEL_SELECT_PROFILE,
    CHANNEL_SHUTOFF,
    PROFILE_ACTIVE,
    PROFILE_ATTRIBUTE_CHANNELS,
    PROFILE_INACTIVE,
    PROFILE_MAX,
    PROFILE_MIN,
    SHUTOFF_CLOSED,
    SHUTOFF_OPEN,
    SHUTOFF_STATES,
)

_LOGGER = logging.getLogger(__name__)


class CommandKind(Enum):
    """Kind of command delivered to a channel."""

    REFRESH = "refresh"
    DECIMAL = "decimal"
    ON_OFF = "on_off"
    STRING = "string"


@dataclass(frozen=True)
class ChannelCommand:
    """A command addressed to one channel."""

    kind: CommandKind
    value: int | bool | str | None = None

    @classmethod
    def refresh(cls) -> ChannelCommand:
        return cls(CommandKind.REFRESH)

    @classmethod
    def decimal(cls, value: int) -> ChannelCommand:
        return cls(CommandKind.DECIMAL, int(value))

    @classmethod
    def on_off(cls, on: bool) -> ChannelCommand:
        return cls(CommandKind.ON_OFF, bool(on))

    @classmethod
    def string(cls, text: str) -> ChannelCommand:
        return cls(CommandKind.STRING, str(text))


class DeviceStatus(Enum):
    """Reachability of the device as seen by the last full refresh."""

    UNKNOWN = "unknown"
    ONLINE = "online"
    OFFLINE = "offline"


StateSink = Callable[[str, Any], None]
StatusSink = Callable[[DeviceStatus, str | None], None]


def _is_profile(profile: int) -> bool:
    return PROFILE_MIN <= profile <= PROFILE_MAX


class SyrSafeTechDevice:
    """Translate channel commands into device requests."""

    def __init__(
        self,
        client: SyrSafeTechClient,
        update_state: StateSink,
        update_status: StatusSink,
    ) -> None:
        """Initialize the device adapter."""
        self._client = client
        self._update_state = update_state
        self._update_status = update_status

        self._handlers: dict[str, Callable[[ChannelCommand], Awaitable[None]]] = {
            CHANNEL_SHUTOFF: self._async_shutoff_command,
            CHANNEL_SELECT_PROFILE: self._async_select_profile_command,
            CHANNEL_NUMBER_OF_PROFILES: self._async_profile_count_command,
            CHANNEL_PROFILE_AVAILABILITY: self._async_availability_command,
            CHANNEL_PROFILE_NAME: self._async_profile_name_command,
        }
        for channel in PROFILE_ATTRIBUTE_CHANNELS:
            self._handlers[channel] = partial(self._async_attribute_command, channel)

    @property
    def host(self) -> str:
        return self._client.host

    async def async_handle_command(self, channel: str, command: ChannelCommand) -> None:
        """Handle a command sent to one channel.

        Never raises: communication errors are logged and dropped here, the
        full refresh path reports them as an offline status itself.
        """
        handler = self._handlers.get(channel)
        if handler is None:
            _LOGGER.warning("Unknown channel: %s", channel)
            return

        try:
            await handler(command)
        except SyrSafeTechError as err:
            _LOGGER.error(
                "Error handling %s command for %s: %s",
                command.kind.value,
                channel,
                err,
            )

    async def async_refresh_all(self) -> None:
        """Re-read every channel and report the device status.

        The profile read at the start of the sequence is used for every
        profile-scoped channel. The first communication error aborts the
        sequence; channels updated before it keep their new values.
        """
        try:
            await self._async_update_shutoff()
            profile = await self._async_update_selected_profile()
            await self._async_update_profile_count()
            if _is_profile(profile):
                await self._async_update_availability(profile)
                await self._async_update_profile_name(profile)
                for channel in PROFILE_ATTRIBUTE_CHANNELS:
                    await self._async_update_attribute(channel, profile)
            else:
                _LOGGER.warning("Selected profile unknown, skipping profile channels")
        except SyrSafeTechTimeoutError as err:
            _LOGGER.error("Timeout refreshing %s: %s", self.host, err)
            self._update_status(DeviceStatus.OFFLINE, f"Timeout: {err}")
            return
        except SyrSafeTechError as err:
            _LOGGER.error("Error refreshing %s: %s", self.host, err)
            self._update_status(DeviceStatus.OFFLINE, str(err))
            return

        self._update_status(DeviceStatus.ONLINE, None)

    def _reject(self, channel: str, command: ChannelCommand) -> None:
        _LOGGER.warning(
            "Invalid command type for %s channel: %s", channel, command.kind.value
        )

    # Shutoff

    async def _async_shutoff_command(self, command: ChannelCommand) -> None:
        if command.kind is CommandKind.REFRESH:
            await self._async_update_shutoff()
            return

        if command.kind is CommandKind.DECIMAL:
            new_state = command.value
        elif command.kind is CommandKind.ON_OFF:
            current = await self._client.async_get_int(api.get_shutoff())
            if current not in SHUTOFF_STATES:
                _LOGGER.warning("Cannot toggle shutoff, current state is %s", current)
                return
            new_state = SHUTOFF_CLOSED if current == SHUTOFF_OPEN else SHUTOFF_OPEN
        else:
            self._reject(CHANNEL_SHUTOFF, command)
            return

        if new_state not in SHUTOFF_STATES:
            _LOGGER.warning("Invalid shutoff command: %s", new_state)
            return

        request = api.set_shutoff(new_state)
        self._set_shutoff(await self._client.async_get_int(request))

    async def _async_update_shutoff(self) -> None:
        self._set_shutoff(await self._client.async_get_int(api.get_shutoff()))

    def _set_shutoff(self, state: int) -> None:
        if state in SHUTOFF_STATES:
            self._update_state(CHANNEL_SHUTOFF, state)
        else:
            _LOGGER.warning("Invalid shutoff status received: %s", state)

    # Selected profile

    async def _async_select_profile_command(self, command: ChannelCommand) -> None:
        if command.kind is CommandKind.REFRESH:
            await self._async_update_selected_profile()
            return
        if command.kind is not CommandKind.DECIMAL:
            self._reject(CHANNEL_SELECT_PROFILE, command)
            return

        profile = command.value
        if not _is_profile(profile):
            _LOGGER.warning("Invalid select profile command: %s", profile)
            return

        await self._async_select_profile(profile)
        await self.async_refresh_all()

    async def _async_selected_profile(self) -> int:
        """Read the selected profile without touching the channel."""
        return await self._client.async_get_int(api.get_selected_profile())

    async def _async_update_selected_profile(self) -> int:
        profile = await self._async_selected_profile()
        self._set_selected_profile(profile)
        return profile

    async def _async_select_profile(self, profile: int) -> None:
        """Mark a profile active, then make it the selected one."""
        await self._async_set_availability(profile, PROFILE_ACTIVE)
        command = api.set_selected_profile(profile)
        self._set_selected_profile(await self._client.async_get_int(command))

    def _set_selected_profile(self, profile: int) -> None:
        if _is_profile(profile):
            self._update_state(CHANNEL_SELECT_PROFILE, profile)
        else:
            _LOGGER.warning("Invalid select profile status received: %s", profile)

    # Number of profiles

    async def _async_profile_count_command(self, command: ChannelCommand) -> None:
        if command.kind is not CommandKind.REFRESH:
            self._reject(CHANNEL_NUMBER_OF_PROFILES, command)
            return
        await self._async_update_profile_count()

    async def _async_update_profile_count(self) -> None:
        count = await self._client.async_get_int(api.get_profile_count())
        if count >= 0:
            self._update_state(CHANNEL_NUMBER_OF_PROFILES, count)
        else:
            _LOGGER.warning("Invalid number of profiles received: %s", count)

    # Profile availability

    async def _async_availability_command(self, command: ChannelCommand) -> None:
        if command.kind is CommandKind.REFRESH:
            profile = await self._async_selected_profile()
            if _is_profile(profile):
                await self._async_update_availability(profile)
            else:
                _LOGGER.warning("Selected profile unknown: %s", profile)
            return

        if command.kind is CommandKind.DECIMAL:
            status = command.value
        elif command.kind is CommandKind.ON_OFF:
            status = PROFILE_ACTIVE if command.value else PROFILE_INACTIVE
        else:
            self._reject(CHANNEL_PROFILE_AVAILABILITY, command)
            return

        if status not in (PROFILE_INACTIVE, PROFILE_ACTIVE):
            _LOGGER.warning("Invalid profile availability command: %s", status)
            return

        selected = await self._async_selected_profile()
        if not _is_profile(selected):
            _LOGGER.warning(
                "Cannot change profile availability, selected profile is %s", selected
            )
            return

        if await self._async_set_availability(selected, status):
            self._update_state(CHANNEL_PROFILE_AVAILABILITY, status == PROFILE_ACTIVE)

        if status == PROFILE_INACTIVE:
            await self._async_reselect_profile(selected)

    async def _async_set_availability(self, profile: int, status: int) -> bool:
        command = api.set_profile_availability(profile, status)
        if await self._client.async_get_int(command) == status:
            return True
        _LOGGER.warning("Failed to set PA%s status to %s", profile, status)
        return False

    async def _async_update_availability(self, profile: int) -> None:
        command = api.get_profile_availability(profile)
        status = await self._client.async_get_int(command)
        if status in (PROFILE_INACTIVE, PROFILE_ACTIVE):
            self._update_state(CHANNEL_PROFILE_AVAILABILITY, status == PROFILE_ACTIVE)
        else:
            _LOGGER.warning("Invalid profile availability status received: %s", status)

    async def _async_first_active_profile(self, exclude: int) -> int | None:
        """Scan profiles in order for an active one other than exclude."""
        for profile in range(PROFILE_MIN, PROFILE_MAX + 1):
            if profile == exclude:
                continue
            command = api.get_profile_availability(profile)
            if await self._client.async_get_int(command) == PROFILE_ACTIVE:
                return profile
        return None

    async def _async_reselect_profile(self, deactivated: int) -> None:
        profile = await self._async_first_active_profile(deactivated)
        if profile is None:
            _LOGGER.warning(
                "Cannot deactivate profile as there is no other active profile available"
            )
            return
        _LOGGER.info("Profile %s deactivated, selecting profile %s", deactivated, profile)
        await self._async_select_profile(profile)

    # Profile name

    async def _async_profile_name_command(self, command: ChannelCommand) -> None:
        if command.kind not in (CommandKind.REFRESH, CommandKind.STRING):
            self._reject(CHANNEL_PROFILE_NAME, command)
            return
        if command.kind is CommandKind.STRING and not command.value:
            _LOGGER.warning("Refusing to set an empty profile name")
            return

        profile = await self._async_selected_profile()
        if not _is_profile(profile):
            _LOGGER.warning("Selected profile unknown: %s", profile)
            return

        if command.kind is CommandKind.REFRESH:
            await self._async_update_profile_name(profile)
            return

        request = api.set_profile_name(profile, command.value)
        self._set_profile_name(await self._client.async_get_text(request))

    async def _async_update_profile_name(self, profile: int) -> None:
        command = api.get_profile_name(profile)
        self._set_profile_name(await self._client.async_get_text(command))

    def _set_profile_name(self, name: str) -> None:
        if name:
            self._update_state(CHANNEL_PROFILE_NAME, name)
        else:
            _LOGGER.warning("Invalid profile name received")

    # Profile attributes

    async def _async_attribute_command(
        self, channel: str, command: ChannelCommand
    ) -> None:
        if command.kind is not CommandKind.REFRESH:
            self._reject(channel, command)
            return

        profile = await self._async_selected_profile()
        if not _is_profile(profile):
            _LOGGER.warning("Selected profile unknown: %s", profile)
            return
        await self._async_update_attribute(channel, profile)

    async def _async_update_attribute(self, channel: str, profile: int) -> None:
        command = api.get_profile_attribute(PROFILE_ATTRIBUTE_CHANNELS[channel], profile)
        value = await self._client.async_get_text(command, default=None)
        if value is None:
            _LOGGER.warning("Invalid %s value received", channel)
            return

        if channel in BOOLEAN_CHANNELS:
            self._update_state(channel, value == "1")
        else:
            self._update_state(channel, value)
