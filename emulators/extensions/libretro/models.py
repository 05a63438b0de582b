"""Libretro constants and typed views over a parsed ``buttonmap.xml``."""

from __future__ import annotations

from dataclasses import dataclass, field


# ── Libretro device types (libretro.h) ───────────────────────────────────

RETRO_DEVICE_NONE     = 0
RETRO_DEVICE_JOYPAD   = 1
RETRO_DEVICE_MOUSE    = 2
RETRO_DEVICE_KEYBOARD = 3
RETRO_DEVICE_LIGHTGUN = 4
RETRO_DEVICE_ANALOG   = 5
RETRO_DEVICE_POINTER  = 6

# ── Joypad button IDs ────────────────────────────────────────────────────

RETRO_DEVICE_ID_JOYPAD_B      = 0
RETRO_DEVICE_ID_JOYPAD_Y      = 1
RETRO_DEVICE_ID_JOYPAD_SELECT = 2
RETRO_DEVICE_ID_JOYPAD_START  = 3
RETRO_DEVICE_ID_JOYPAD_UP     = 4
RETRO_DEVICE_ID_JOYPAD_DOWN   = 5
RETRO_DEVICE_ID_JOYPAD_LEFT   = 6
RETRO_DEVICE_ID_JOYPAD_RIGHT  = 7
RETRO_DEVICE_ID_JOYPAD_A      = 8
RETRO_DEVICE_ID_JOYPAD_X      = 9
RETRO_DEVICE_ID_JOYPAD_L      = 10
RETRO_DEVICE_ID_JOYPAD_R      = 11
RETRO_DEVICE_ID_JOYPAD_L2     = 12
RETRO_DEVICE_ID_JOYPAD_R2     = 13
RETRO_DEVICE_ID_JOYPAD_L3     = 14
RETRO_DEVICE_ID_JOYPAD_R3     = 15

# ── Analog stick indices / axis IDs ──────────────────────────────────────

RETRO_DEVICE_INDEX_ANALOG_LEFT  = 0
RETRO_DEVICE_INDEX_ANALOG_RIGHT = 1
RETRO_DEVICE_ID_ANALOG_X        = 0
RETRO_DEVICE_ID_ANALOG_Y        = 1

# ── Mouse / lightgun / pointer IDs ───────────────────────────────────────

RETRO_DEVICE_ID_MOUSE_X               = 0
RETRO_DEVICE_ID_MOUSE_Y               = 1
RETRO_DEVICE_ID_MOUSE_LEFT            = 2
RETRO_DEVICE_ID_MOUSE_RIGHT           = 3
RETRO_DEVICE_ID_MOUSE_WHEELUP         = 4
RETRO_DEVICE_ID_MOUSE_WHEELDOWN       = 5
RETRO_DEVICE_ID_MOUSE_MIDDLE          = 6
RETRO_DEVICE_ID_MOUSE_HORIZ_WHEELUP   = 7
RETRO_DEVICE_ID_MOUSE_HORIZ_WHEELDOWN = 8

RETRO_DEVICE_ID_LIGHTGUN_X       = 0
RETRO_DEVICE_ID_LIGHTGUN_Y       = 1
RETRO_DEVICE_ID_LIGHTGUN_TRIGGER = 2
RETRO_DEVICE_ID_LIGHTGUN_CURSOR  = 3
RETRO_DEVICE_ID_LIGHTGUN_TURBO   = 4
RETRO_DEVICE_ID_LIGHTGUN_PAUSE   = 5
RETRO_DEVICE_ID_LIGHTGUN_START   = 6

RETRO_DEVICE_ID_POINTER_X       = 0
RETRO_DEVICE_ID_POINTER_Y       = 1
RETRO_DEVICE_ID_POINTER_PRESSED = 2

# Returned by index lookups that cannot be resolved.
RETRO_INDEX_NONE = -1


# ── buttonmap.xml vocabulary ─────────────────────────────────────────────

BUTTONMAP_XML               = "buttonmap.xml"
BUTTONMAP_XML_ROOT          = "buttonmap"
BUTTONMAP_XML_ELM_DEVICE    = "device"
BUTTONMAP_XML_ATTR_DEVICE_ID   = "deviceid"
BUTTONMAP_XML_ATTR_DEVICE_TYPE = "type"
BUTTONMAP_XML_ELM_FEATURE   = "feature"
BUTTONMAP_XML_ATTR_FEATURE_NAME  = "name"
BUTTONMAP_XML_ATTR_FEATURE_MAPTO = "mapto"


# ── Default controller ───────────────────────────────────────────────────
# Never looked up in buttonmap.xml.

DEFAULT_CONTROLLER_ID = "game.controller.default"

DEFAULT_CONTROLLER_TYPE = RETRO_DEVICE_ANALOG

DEFAULT_CONTROLLER_FEATURES: dict[str, int] = {
    "a":            RETRO_DEVICE_ID_JOYPAD_A,
    "b":            RETRO_DEVICE_ID_JOYPAD_B,
    "x":            RETRO_DEVICE_ID_JOYPAD_X,
    "y":            RETRO_DEVICE_ID_JOYPAD_Y,
    "start":        RETRO_DEVICE_ID_JOYPAD_START,
    "back":         RETRO_DEVICE_ID_JOYPAD_SELECT,
    "leftbumper":   RETRO_DEVICE_ID_JOYPAD_L2,
    "leftbumber":   RETRO_DEVICE_ID_JOYPAD_L2,   # legacy spelling
    "rightbumper":  RETRO_DEVICE_ID_JOYPAD_R2,
    "leftthumb":    RETRO_DEVICE_ID_JOYPAD_L,
    "rightthumb":   RETRO_DEVICE_ID_JOYPAD_R,
    "up":           RETRO_DEVICE_ID_JOYPAD_UP,
    "down":         RETRO_DEVICE_ID_JOYPAD_DOWN,
    "right":        RETRO_DEVICE_ID_JOYPAD_RIGHT,
    "left":         RETRO_DEVICE_ID_JOYPAD_LEFT,
    "lefttrigger":  RETRO_DEVICE_ID_JOYPAD_L3,
    "righttrigger": RETRO_DEVICE_ID_JOYPAD_R3,
    "leftstick":    RETRO_DEVICE_INDEX_ANALOG_LEFT,
    "rightstick":   RETRO_DEVICE_INDEX_ANALOG_RIGHT,
}


# ── Document views ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class FeatureEntry:
    """One ``<feature>`` element.

    Attributes missing from the XML are ``None``; the resolver decides what
    a missing attribute means for a lookup.
    """
    name: str | None
    mapto: str | None


@dataclass(frozen=True)
class DeviceEntry:
    """One ``<device>`` element and its ``<feature>`` children, in order."""
    device_id: str | None
    device_type: str | None
    features: tuple[FeatureEntry, ...] = ()


@dataclass(frozen=True)
class MappingDocument:
    """A parsed ``buttonmap.xml`` whose root element passed validation."""
    devices: tuple[DeviceEntry, ...] = field(default_factory=tuple)
