"""Constants for pylifxcloud library."""

from __future__ import annotations


# API Configuration
DEFAULT_BASE_URL = "https://api.lifx.com/v1"
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_SELECTOR = "all"

# Environment variables read by LifxConfig.from_env
ENV_TOKEN = "LIFX_TOKEN"
ENV_BASE_URL = "LIFX_API_BASE_URL"

# Endpoints (formatted with the selector)
ENDPOINT_LIST_LIGHTS = "/lights/{selector}"
ENDPOINT_SET_STATE = "/lights/{selector}/state"
ENDPOINT_SET_STATES = "/lights/states"
ENDPOINT_STATE_DELTA = "/lights/{selector}/state/delta"
ENDPOINT_TOGGLE = "/lights/{selector}/toggle"
ENDPOINT_BREATHE = "/lights/{selector}/effects/breathe"

# Power values
POWER_ON = "on"
POWER_OFF = "off"

# Breathe effect defaults
DEFAULT_BREATHE_CYCLES = 1.0
DEFAULT_BREATHE_PERIOD = 1.0
DEFAULT_BREATHE_PERSIST = False
DEFAULT_BREATHE_POWER_ON = True
DEFAULT_BREATHE_PEAK = 0.5

# Parameter Validation
BREATHE_PEAK_MIN = 0.0
BREATHE_PEAK_MAX = 1.0

# Rate limit headers
HEADER_RETRY_AFTER = "Retry-After"
HEADER_RATE_LIMIT_RESET = "X-RateLimit-Reset"
