"""Data coordinator for SYR SafeTech Connect."""
from __future__ import annotations

from datetime import timedelta
import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.update_coordinator import (
    DataUpdateCoordinator,
    UpdateFailed,
)

from .api import SyrSafeTechClient
from .const import DOMAIN, UPDATE_INTERVAL
from .device import ChannelCommand, DeviceStatus, SyrSafeTechDevice

_LOGGER = logging.getLogger(__name__)


class SyrSafeTechCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Class to manage polling and controlling one SafeTech valve."""

    def __init__(
        self,
        hass: HomeAssistant,
        host: str,
        config_entry: ConfigEntry | None = None,
    ) -> None:
        """Initialize coordinator."""
        self.host = host
        self.session = async_get_clientsession(hass)
        self.client = SyrSafeTechClient(self.session, host)
        self.device = SyrSafeTechDevice(
            self.client,
            self._handle_channel_update,
            self._handle_status_update,
        )
        self.channels: dict[str, Any] = {}
        self.status = DeviceStatus.UNKNOWN
        self.status_detail: str | None = None

        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=DOMAIN,
            update_interval=timedelta(seconds=UPDATE_INTERVAL),
        )

    def _handle_channel_update(self, channel: str, value: Any) -> None:
        """Store a new channel value pushed by the device."""
        _LOGGER.debug("Channel %s updated: %s", channel, value)
        self.channels[channel] = value

    def _handle_status_update(self, status: DeviceStatus, detail: str | None) -> None:
        """Record the device status reported by a full refresh."""
        if status is not self.status:
            _LOGGER.info("SafeTech %s is now %s", self.host, status.value)
        self.status = status
        self.status_detail = detail

    async def _async_update_data(self) -> dict[str, Any]:
        """Refresh every channel from the valve."""
        await self.device.async_refresh_all()
        if self.status is DeviceStatus.OFFLINE:
            raise UpdateFailed(f"Error communicating with SafeTech: {self.status_detail}")
        return self.channels

    async def async_handle_command(self, channel: str, command: ChannelCommand) -> None:
        """Send a channel command and publish whatever changed."""
        await self.device.async_handle_command(channel, command)

        self.last_update_success = self.status is not DeviceStatus.OFFLINE
        if self.last_update_success:
            self.last_exception = None
        else:
            self.last_exception = UpdateFailed(self.status_detail)
        self.data = self.channels
        self.async_update_listeners()
