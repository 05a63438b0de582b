"""Translate ``buttonmap.xml`` attribute values into libretro constants."""

from __future__ import annotations

from . import models
from .models import (
    RETRO_DEVICE_ANALOG,
    RETRO_DEVICE_ID_JOYPAD_A,
    RETRO_DEVICE_ID_JOYPAD_B,
    RETRO_DEVICE_ID_JOYPAD_DOWN,
    RETRO_DEVICE_ID_JOYPAD_L,
    RETRO_DEVICE_ID_JOYPAD_L2,
    RETRO_DEVICE_ID_JOYPAD_L3,
    RETRO_DEVICE_ID_JOYPAD_LEFT,
    RETRO_DEVICE_ID_JOYPAD_R,
    RETRO_DEVICE_ID_JOYPAD_R2,
    RETRO_DEVICE_ID_JOYPAD_R3,
    RETRO_DEVICE_ID_JOYPAD_RIGHT,
    RETRO_DEVICE_ID_JOYPAD_SELECT,
    RETRO_DEVICE_ID_JOYPAD_START,
    RETRO_DEVICE_ID_JOYPAD_UP,
    RETRO_DEVICE_ID_JOYPAD_X,
    RETRO_DEVICE_ID_JOYPAD_Y,
    RETRO_DEVICE_ID_LIGHTGUN_CURSOR,
    RETRO_DEVICE_ID_LIGHTGUN_PAUSE,
    RETRO_DEVICE_ID_LIGHTGUN_TRIGGER,
    RETRO_DEVICE_ID_LIGHTGUN_TURBO,
    RETRO_DEVICE_ID_MOUSE_HORIZ_WHEELDOWN,
    RETRO_DEVICE_ID_MOUSE_HORIZ_WHEELUP,
    RETRO_DEVICE_ID_MOUSE_MIDDLE,
    RETRO_DEVICE_ID_MOUSE_WHEELDOWN,
    RETRO_DEVICE_ID_MOUSE_WHEELUP,
    RETRO_DEVICE_ID_POINTER_PRESSED,
    RETRO_DEVICE_INDEX_ANALOG_LEFT,
    RETRO_DEVICE_INDEX_ANALOG_RIGHT,
    RETRO_DEVICE_JOYPAD,
    RETRO_DEVICE_KEYBOARD,
    RETRO_DEVICE_LIGHTGUN,
    RETRO_DEVICE_MOUSE,
    RETRO_DEVICE_NONE,
    RETRO_DEVICE_POINTER,
    RETRO_INDEX_NONE,
)


_DEVICE_TYPES: dict[str, int] = {
    "joypad":   RETRO_DEVICE_JOYPAD,
    "mouse":    RETRO_DEVICE_MOUSE,
    "keyboard": RETRO_DEVICE_KEYBOARD,
    "lightgun": RETRO_DEVICE_LIGHTGUN,
    "analog":   RETRO_DEVICE_ANALOG,
    "pointer":  RETRO_DEVICE_POINTER,
}

# Joypad names win where mouse / lightgun IDs would collide ("left", "start").
_FEATURE_INDICES: dict[str, int] = {
    # --- Joypad ---
    "a":      RETRO_DEVICE_ID_JOYPAD_A,
    "b":      RETRO_DEVICE_ID_JOYPAD_B,
    "x":      RETRO_DEVICE_ID_JOYPAD_X,
    "y":      RETRO_DEVICE_ID_JOYPAD_Y,
    "start":  RETRO_DEVICE_ID_JOYPAD_START,
    "select": RETRO_DEVICE_ID_JOYPAD_SELECT,
    "up":     RETRO_DEVICE_ID_JOYPAD_UP,
    "down":   RETRO_DEVICE_ID_JOYPAD_DOWN,
    "left":   RETRO_DEVICE_ID_JOYPAD_LEFT,
    "right":  RETRO_DEVICE_ID_JOYPAD_RIGHT,
    "l":      RETRO_DEVICE_ID_JOYPAD_L,
    "r":      RETRO_DEVICE_ID_JOYPAD_R,
    "l2":     RETRO_DEVICE_ID_JOYPAD_L2,
    "r2":     RETRO_DEVICE_ID_JOYPAD_R2,
    "l3":     RETRO_DEVICE_ID_JOYPAD_L3,
    "r3":     RETRO_DEVICE_ID_JOYPAD_R3,

    # --- Analog sticks ---
    "leftstick":  RETRO_DEVICE_INDEX_ANALOG_LEFT,
    "rightstick": RETRO_DEVICE_INDEX_ANALOG_RIGHT,

    # --- Mouse ---
    "wheelup":        RETRO_DEVICE_ID_MOUSE_WHEELUP,
    "wheeldown":      RETRO_DEVICE_ID_MOUSE_WHEELDOWN,
    "middle":         RETRO_DEVICE_ID_MOUSE_MIDDLE,
    "horizwheelup":   RETRO_DEVICE_ID_MOUSE_HORIZ_WHEELUP,
    "horizwheeldown": RETRO_DEVICE_ID_MOUSE_HORIZ_WHEELDOWN,

    # --- Lightgun ---
    "trigger": RETRO_DEVICE_ID_LIGHTGUN_TRIGGER,
    "cursor":  RETRO_DEVICE_ID_LIGHTGUN_CURSOR,
    "turbo":   RETRO_DEVICE_ID_LIGHTGUN_TURBO,
    "pause":   RETRO_DEVICE_ID_LIGHTGUN_PAUSE,

    # --- Pointer ---
    "pressed": RETRO_DEVICE_ID_POINTER_PRESSED,
}

# libretro.h constant names, as written in the button maps shipped with cores.
_DEVICE_TYPES.update({
    name: value for name, value in vars(models).items()
    if name.startswith("RETRO_DEVICE_")
    and not name.startswith(("RETRO_DEVICE_ID_", "RETRO_DEVICE_INDEX_"))
})
_FEATURE_INDICES.update({
    name: value for name, value in vars(models).items()
    if name.startswith(("RETRO_DEVICE_ID_", "RETRO_DEVICE_INDEX_"))
})


def device_type(name: str) -> int:
    """Return the ``RETRO_DEVICE_*`` constant for *name*.

    Unrecognised names give ``RETRO_DEVICE_NONE``.
    """
    return _DEVICE_TYPES.get(name, RETRO_DEVICE_NONE)


def feature_index(name: str) -> int:
    """Return the libretro button / axis index for *name*, or ``-1``."""
    return _FEATURE_INDICES.get(name, RETRO_INDEX_NONE)
