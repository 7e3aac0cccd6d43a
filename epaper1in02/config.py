# config.py - pin configuration for the 1.02" panel
#
# - Defaults match the Waveshare e-Paper HAT wiring (BCM numbering)
# - Optional JSON file overrides defaults
# - EPD_<ROLE>_PIN environment variables override both
# - Values are Blinka board attribute names ("D17"), resolved at acquisition

import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_ENV = "EPD_CONFIG"

# SPI clock for all transfers (4 MHz, mode 0)
SPI_BAUDRATE = 4_000_000
SPI_PHASE = 0
SPI_POLARITY = 0

# ----------------------------
# Defaults
# ----------------------------
DEFAULT_PINS = {
    "sck": "SCK",
    "mosi": "MOSI",
    "cs": None,        # None = hardware CE0 driven by the SPI device
    "rst": "D17",
    "dc": "D25",
    "busy": "D24",
    "pwr": "D18",
}


# ----------------------------
# Public API
# ----------------------------
def load_pin_config(path=None, env=None) -> dict:
    """
    Build the pin map for the panel.

    Applies defaults, then the JSON file at `path` (or $EPD_CONFIG), then
    EPD_<ROLE>_PIN environment overrides. Unknown keys are ignored.

    Raises:
        ValueError: If the config file is not a JSON object
    """
    if env is None:
        env = os.environ

    pins = dict(DEFAULT_PINS)

    path = path or env.get(CONFIG_ENV)
    if path:
        pins.update(_load_file(path))

    for role in DEFAULT_PINS:
        value = env.get(f"EPD_{role.upper()}_PIN")
        if value:
            pins[role] = value

    return pins


def _load_file(path) -> dict:
    try:
        with open(path, "r") as f:
            cfg = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid pin config {path}: {e}") from e

    if not isinstance(cfg, dict):
        raise ValueError(f"Pin config {path} must be a JSON object")

    # Accept either {"pins": {...}} or a flat mapping
    cfg = cfg.get("pins", cfg)

    out = {}
    for key, value in cfg.items():
        if key not in DEFAULT_PINS:
            logger.warning("ignoring unknown pin role %r in %s", key, path)
            continue
        out[key] = None if value is None else str(value)
    return out
