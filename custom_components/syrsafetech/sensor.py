"""Sensor platform for SYR SafeTech Connect."""
from __future__ import annotations

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import (
    CHANNEL_NUMBER_OF_PROFILES,
    CHANNEL_PROFILE_MAX_FLOW,
    CHANNEL_PROFILE_RETURN_TIME,
    CHANNEL_PROFILE_TIME_LEVEL,
    CHANNEL_PROFILE_VOLUME_LEVEL,
    DOMAIN,
)
from .coordinator import SyrSafeTechCoordinator
from .entity import SyrSafeTechEntity

# channel, name, icon
PROFILE_SENSORS = [
    (CHANNEL_PROFILE_VOLUME_LEVEL, "Profile volume level", "mdi:cup-water"),
    (CHANNEL_PROFILE_TIME_LEVEL, "Profile time level", "mdi:timer-outline"),
    (CHANNEL_PROFILE_MAX_FLOW, "Profile max flow", "mdi:water-pump"),
    (CHANNEL_PROFILE_RETURN_TIME, "Profile return time", "mdi:timer-refresh-outline"),
]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up SafeTech sensors from config entry."""
    coordinator: SyrSafeTechCoordinator = hass.data[DOMAIN][entry.entry_id]

    sensors: list[SensorEntity] = [
        NumberOfProfilesSensor(coordinator, entry.entry_id, entry.title)
    ]
    for channel, name, icon in PROFILE_SENSORS:
        sensors.append(
            ProfileSettingSensor(coordinator, entry.entry_id, entry.title, channel, name, icon)
        )

    async_add_entities(sensors)


class NumberOfProfilesSensor(SyrSafeTechEntity, SensorEntity):
    """Number of profiles stored on the valve."""

    _attr_state_class = SensorStateClass.MEASUREMENT

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(
            coordinator,
            entry_id,
            CHANNEL_NUMBER_OF_PROFILES,
            "Number of profiles",
            device_name,
        )
        self._attr_icon = "mdi:account-multiple"

    @property
    def native_value(self) -> int | None:
        """Return the number of profiles."""
        return self._get_value()


class ProfileSettingSensor(SyrSafeTechEntity, SensorEntity):
    """Raw setting of the selected profile, as reported by the valve."""

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        device_name: str,
        channel: str,
        name: str,
        icon: str,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry_id, channel, name, device_name)
        self._attr_icon = icon

    @property
    def native_value(self) -> str | None:
        """Return the setting value."""
        return self._get_value()
