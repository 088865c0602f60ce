"""Binary sensor platform for SYR SafeTech Connect."""
from __future__ import annotations

from homeassistant.components.binary_sensor import BinarySensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import (
    CHANNEL_PROFILE_BUZZER_ON,
    CHANNEL_PROFILE_LEAKAGE_WARNING_ON,
    CHANNEL_PROFILE_MICROLEAKAGE,
    DOMAIN,
)
from .coordinator import SyrSafeTechCoordinator
from .entity import SyrSafeTechEntity

# channel, name, icon
PROFILE_FLAGS = [
    (CHANNEL_PROFILE_MICROLEAKAGE, "Profile microleakage", "mdi:water-alert"),
    (CHANNEL_PROFILE_BUZZER_ON, "Profile buzzer", "mdi:volume-high"),
    (CHANNEL_PROFILE_LEAKAGE_WARNING_ON, "Profile leakage warning", "mdi:alert"),
]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up SafeTech binary sensors from config entry."""
    coordinator: SyrSafeTechCoordinator = hass.data[DOMAIN][entry.entry_id]

    async_add_entities(
        ProfileFlagSensor(coordinator, entry.entry_id, entry.title, channel, name, icon)
        for channel, name, icon in PROFILE_FLAGS
    )


class ProfileFlagSensor(SyrSafeTechEntity, BinarySensorEntity):
    """On/off setting of the selected profile."""

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
        channel: str,
        name: str,
        icon: str,
    ) -> None:
        """Initialize the binary sensor."""
        super().__init__(coordinator, entry_id, channel, name, device_name)
        self._attr_icon = icon

    @property
    def is_on(self) -> bool:
        """Return true if the setting is enabled."""
        return bool(self._get_value())
