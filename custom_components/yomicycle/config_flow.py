import voluptuous as vol
from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.helpers.selector import selector

from .const import (
    CONF_DAY_ROLLOVER,
    CONF_HAVDALAH_OFFSET,
    CONF_ROTATIONS,
    CONF_SKIP_INTRO,
    DEFAULT_DAY_ROLLOVER,
    DEFAULT_HAVDALAH_OFFSET,
    DEFAULT_ROTATIONS,
    DEFAULT_SKIP_INTRO,
    DOMAIN,
    ROLLOVER_HAVDALAH,
    ROLLOVER_MIDNIGHT,
    ROTATION_ORCHOS_TZADIKIM,
    ROTATION_TEHILIM,
)


def _schema(get) -> vol.Schema:
    """Shared by the setup card and the Options page."""
    return vol.Schema(
        {
            vol.Optional(
                CONF_ROTATIONS,
                default=get(CONF_ROTATIONS, DEFAULT_ROTATIONS),
            ): selector({
                "select": {
                    "multiple": True,
                    "options": [
                        {"value": ROTATION_ORCHOS_TZADIKIM, "label": "אורחות צדיקים"},
                        {"value": ROTATION_TEHILIM,         "label": "תהילים"},
                    ]
                }
            }),
            vol.Optional(
                CONF_DAY_ROLLOVER,
                default=get(CONF_DAY_ROLLOVER, DEFAULT_DAY_ROLLOVER),
            ): selector({
                "select": {
                    "options": [
                        {"value": ROLLOVER_MIDNIGHT, "label": "12 AM"},
                        {"value": ROLLOVER_HAVDALAH, "label": "זמן הבדלה"},
                    ]
                }
            }),
            vol.Optional(
                CONF_HAVDALAH_OFFSET,
                default=get(CONF_HAVDALAH_OFFSET, DEFAULT_HAVDALAH_OFFSET),
            ): int,
            vol.Optional(
                CONF_SKIP_INTRO,
                default=get(CONF_SKIP_INTRO, DEFAULT_SKIP_INTRO),
            ): bool,
        }
    )


def _validate(user_input: dict) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not user_input.get(CONF_ROTATIONS):
        errors[CONF_ROTATIONS] = "select_rotation_required"
    if int(user_input.get(CONF_HAVDALAH_OFFSET, 0)) < 0:
        errors[CONF_HAVDALAH_OFFSET] = "negative_offset"
    return errors


class YomiCycleConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Yomi Cycle."""
    VERSION = 1

    async def async_step_user(self, user_input=None):
        # Only one instance
        if self._async_current_entries():
            return self.async_abort(reason="single_instance_allowed")

        errors = {}
        if user_input is not None:
            errors = _validate(user_input)
            if not errors:
                return self.async_create_entry(title="Yomi Cycle", data=user_input)

        defaults = user_input or {}
        return self.async_show_form(
            step_id="user",
            data_schema=_schema(lambda key, default: defaults.get(key, default)),
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return YomiCycleOptionsFlow()


class YomiCycleOptionsFlow(config_entries.OptionsFlow):
    """Options page: same fields as setup, prefilled from the entry."""

    async def async_step_init(self, user_input=None):
        errors = {}
        if user_input is not None:
            errors = _validate(user_input)
            if not errors:
                return self.async_create_entry(title="", data=user_input)

        opts = self.config_entry.options or {}
        data = self.config_entry.data or {}

        def get(key, default):
            if user_input and key in user_input:
                return user_input[key]
            return opts.get(key, data.get(key, default))

        return self.async_show_form(
            step_id="init", data_schema=_schema(get), errors=errors
        )
