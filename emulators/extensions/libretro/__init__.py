"""Libretro button-map extension for Meridian.

Resolves Kodi-style controller profiles (``game.controller.snes``) and
feature names (``a``, ``leftstick``) to the device types and button indices
a libretro core expects, using the ``buttonmap.xml`` shipped next to the
core.  Pure Python; the only parser used is :mod:`xml.etree.ElementTree`.

Quick start::

    from emulators.extensions.libretro import ButtonMapper, LibretroClient

    mapper = ButtonMapper(LibretroClient("cores/snes9x_libretro.dll"))
    mapper.device_type("game.controller.snes")         # RETRO_DEVICE_JOYPAD
    mapper.feature_index("game.controller.snes", "a")  # RETRO_DEVICE_ID_JOYPAD_A
"""

from __future__ import annotations

from .buttonmap import ButtonMapError, ButtonMapper
from .client import LibretroClient
from .models import (
    BUTTONMAP_XML,
    DEFAULT_CONTROLLER_FEATURES,
    DEFAULT_CONTROLLER_ID,
    RETRO_DEVICE_NONE,
    RETRO_INDEX_NONE,
    DeviceEntry,
    FeatureEntry,
    MappingDocument,
)
from .translator import device_type, feature_index
from .xml_io import ButtonMapRootError, parse_buttonmap

__all__ = [
    # Resolver
    "ButtonMapper",
    "ButtonMapError",
    "LibretroClient",
    # Models
    "DeviceEntry",
    "FeatureEntry",
    "MappingDocument",
    "BUTTONMAP_XML",
    "DEFAULT_CONTROLLER_ID",
    "DEFAULT_CONTROLLER_FEATURES",
    "RETRO_DEVICE_NONE",
    "RETRO_INDEX_NONE",
    # Translation
    "device_type",
    "feature_index",
    # XML
    "parse_buttonmap",
    "ButtonMapRootError",
]
