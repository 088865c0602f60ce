"""Switch platform for SYR SafeTech Connect."""
from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import (
    CHANNEL_PROFILE_AVAILABILITY,
    CHANNEL_SHUTOFF,
    DOMAIN,
    SHUTOFF_CLOSED,
    SHUTOFF_OPEN,
)
from .coordinator import SyrSafeTechCoordinator
from .device import ChannelCommand
from .entity import SyrSafeTechEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up SafeTech switches from config entry."""
    coordinator: SyrSafeTechCoordinator = hass.data[DOMAIN][entry.entry_id]

    async_add_entities(
        [
            ShutoffSwitch(coordinator, entry.entry_id, entry.title),
            ProfileAvailabilitySwitch(coordinator, entry.entry_id, entry.title),
        ]
    )


class ShutoffSwitch(SyrSafeTechEntity, SwitchEntity):
    """Valve shutoff, on while the valve is closed."""

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
    ) -> None:
        """Initialize the switch."""
        super().__init__(coordinator, entry_id, CHANNEL_SHUTOFF, "Shutoff", device_name)
        self._attr_icon = "mdi:valve"

    @property
    def is_on(self) -> bool:
        """Return true if the valve is closed."""
        return self._get_value() == SHUTOFF_CLOSED

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Close the valve."""
        await self._async_send(ChannelCommand.decimal(SHUTOFF_CLOSED))

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Open the valve."""
        await self._async_send(ChannelCommand.decimal(SHUTOFF_OPEN))

    async def async_toggle(self, **kwargs: Any) -> None:
        """Flip the valve from whatever state the device reports."""
        await self._async_send(ChannelCommand.on_off(not self.is_on))


class ProfileAvailabilitySwitch(SyrSafeTechEntity, SwitchEntity):
    """Availability of the selected profile."""

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
    ) -> None:
        """Initialize the switch."""
        super().__init__(
            coordinator,
            entry_id,
            CHANNEL_PROFILE_AVAILABILITY,
            "Profile availability",
            device_name,
        )
        self._attr_icon = "mdi:account-check"

    @property
    def is_on(self) -> bool:
        """Return true if the selected profile is active."""
        return bool(self._get_value())

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Activate the selected profile."""
        await self._async_send(ChannelCommand.on_off(True))

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Deactivate the selected profile."""
        await self._async_send(ChannelCommand.on_off(False))
