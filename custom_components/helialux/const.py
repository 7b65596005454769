"""Constants for the HeliaLux integration."""

from datetime import timedelta

DOMAIN = "helialux"
PLATFORMS: tuple[str, ...] = ("light",)

VERSION = "0.3.0"
USER_AGENT = f"HeliaLux-HomeAssistant/{VERSION}"

CONF_COLOR_MODE = "color_mode"
CONF_FRESHNESS = "freshness"
CONF_TIMEOUT = "timeout"

DEFAULT_NAME = "HeliaLux"
DEFAULT_TIMEOUT_MS = 1000
DEFAULT_FRESHNESS_SECONDS = 5
DEFAULT_FRESHNESS_WINDOW = timedelta(seconds=DEFAULT_FRESHNESS_SECONDS)
MANUAL_OVERRIDE_DURATION = timedelta(hours=1)

STATUS_PATH = "/statusvars.js"
OVERRIDE_PATH = "/stat"
COLOR_PATH = "/color"

ACTION_STATUS = "10"
ACTION_MANUAL_OVERRIDE = "14"
ACTION_SET_COLOR = "1"
