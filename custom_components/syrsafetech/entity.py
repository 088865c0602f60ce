"""Base entity for SYR SafeTech Connect."""
from __future__ import annotations

from typing import Any

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN, MANUFACTURER, MODEL
from .coordinator import SyrSafeTechCoordinator
from .device import ChannelCommand


class SyrSafeTechEntity(CoordinatorEntity[SyrSafeTechCoordinator]):
    """Base entity bound to one channel of the valve."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: SyrSafeTechCoordinator,
        entry_id: str,
        channel: str,
        name: str,
        device_name: str,
    ) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)

        self._channel = channel
        self._attr_name = name
        self._attr_unique_id = f"{entry_id}_{channel}"

        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry_id)},
            name=device_name,
            manufacturer=MANUFACTURER,
            model=MODEL,
            configuration_url=f"http://{coordinator.host}",
        )

    @property
    def available(self) -> bool:
        """Return if entity is available."""
        return super().available and self._channel in (self.coordinator.data or {})

    def _get_value(self) -> Any:
        """Get the channel value from coordinator."""
        return (self.coordinator.data or {}).get(self._channel)

    async def _async_send(self, command: ChannelCommand) -> None:
        await self.coordinator.async_handle_command(self._channel, command)
