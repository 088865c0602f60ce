"""Text platform for SYR SafeTech Connect."""
from __future__ import annotations

from homeassistant.components.text import TextEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import CHANNEL_PROFILE_NAME, DOMAIN
from .coordinator import SyrSafeTechCoordinator
from .device import ChannelCommand
from .entity import SyrSafeTechEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up SafeTech text entities from config entry."""
    coordinator: SyrSafeTechCoordinator = hass.data[DOMAIN][entry.entry_id]

    async_add_entities([ProfileNameText(coordinator, entry.entry_id, entry.title)])


class ProfileNameText(SyrSafeTechEntity, TextEntity):
    """Name of the selected profile."""

    _attr_native_min = 1

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
    ) -> None:
        """Initialize the text entity."""
        super().__init__(
            coordinator, entry_id, CHANNEL_PROFILE_NAME, "Profile name", device_name
        )
        self._attr_icon = "mdi:rename"

    @property
    def native_value(self) -> str | None:
        """Return the profile name."""
        return self._get_value()

    async def async_set_value(self, value: str) -> None:
        """Rename the selected profile."""
        await self._async_send(ChannelCommand.string(value))
