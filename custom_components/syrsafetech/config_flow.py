"""Config flow for SYR SafeTech Connect."""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_NAME
from homeassistant.data_entry_flow import FlowResult
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from . import api
from .api import SyrSafeTechClient, SyrSafeTechError
from .const import CONF_HOST, DOMAIN, SHUTOFF_STATES

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAME = "SafeTech"


class SyrSafeTechConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for SYR SafeTech Connect."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle manual setup."""
        errors = {}

        if user_input is not None:
            host = user_input[CONF_HOST].strip()
            await self.async_set_unique_id(host)
            self._abort_if_unique_id_configured()

            client = SyrSafeTechClient(async_get_clientsession(self.hass), host)
            try:
                state = await client.async_get_int(api.get_shutoff())
            except SyrSafeTechError as err:
                _LOGGER.debug("Cannot reach SafeTech at %s: %s", host, err)
                errors["base"] = "cannot_connect"
            else:
                if state not in SHUTOFF_STATES:
                    errors["base"] = "not_safetech"
                else:
                    return self.async_create_entry(
                        title=user_input.get(CONF_NAME, DEFAULT_NAME),
                        data={
                            CONF_HOST: host,
                            CONF_NAME: user_input.get(CONF_NAME, DEFAULT_NAME),
                        },
                    )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_HOST): str,
                    vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
                }
            ),
            errors=errors,
        )
