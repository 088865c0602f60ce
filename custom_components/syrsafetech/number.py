"""Number platform for SYR SafeTech Connect."""
from __future__ import annotations

from homeassistant.components.number import NumberEntity, NumberMode
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import CHANNEL_SELECT_PROFILE, DOMAIN, PROFILE_MAX, PROFILE_MIN
from .coordinator import SyrSafeTechCoordinator
from .device import ChannelCommand
from .entity import SyrSafeTechEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up SafeTech numbers from config entry."""
    coordinator: SyrSafeTechCoordinator = hass.data[DOMAIN][entry.entry_id]

    async_add_entities([SelectProfileNumber(coordinator, entry.entry_id, entry.title)])


class SelectProfileNumber(SyrSafeTechEntity, NumberEntity):
    """Selected profile of the valve."""

    _attr_native_min_value = PROFILE_MIN
    _attr_native_max_value = PROFILE_MAX
    _attr_native_step = 1
    _attr_mode = NumberMode.BOX

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
    ) -> None:
        """Initialize the number."""
        super().__init__(
            coordinator, entry_id, CHANNEL_SELECT_PROFILE, "Selected profile", device_name
        )
        self._attr_icon = "mdi:account-switch"

    @property
    def native_value(self) -> int | None:
        """Return the selected profile."""
        return self._get_value()

    async def async_set_native_value(self, value: float) -> None:
        """Select another profile."""
        await self._async_send(ChannelCommand.decimal(int(value)))
