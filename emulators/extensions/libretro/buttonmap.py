"""Resolve controller features to libretro device types and indices.

Controller profiles are identified by ids such as ``game.controller.snes``
and their inputs by feature names such as ``a`` or ``leftstick``.  A
libretro core only understands ``RETRO_DEVICE_*`` types and integer button
/ axis indices, so every core ships a ``buttonmap.xml`` next to its library
describing the translation.

:class:`ButtonMapper` loads that file lazily, once, and answers lookups
against it.  The built-in ``game.controller.default`` profile is answered
from a fixed table and never touches the file.

Lookups never raise.  Anything that goes wrong (missing file, bad root,
missing attribute, unknown device or feature) is logged at ERROR and
reported as ``RETRO_DEVICE_NONE`` or ``-1``.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from xml.etree import ElementTree as ET

from . import translator
from .models import (
    BUTTONMAP_XML,
    BUTTONMAP_XML_ATTR_DEVICE_ID,
    BUTTONMAP_XML_ATTR_DEVICE_TYPE,
    BUTTONMAP_XML_ATTR_FEATURE_MAPTO,
    BUTTONMAP_XML_ATTR_FEATURE_NAME,
    BUTTONMAP_XML_ELM_DEVICE,
    BUTTONMAP_XML_ELM_FEATURE,
    BUTTONMAP_XML_ROOT,
    DEFAULT_CONTROLLER_FEATURES,
    DEFAULT_CONTROLLER_ID,
    DEFAULT_CONTROLLER_TYPE,
    RETRO_DEVICE_NONE,
    RETRO_INDEX_NONE,
    DeviceEntry,
    FeatureEntry,
    MappingDocument,
)
from .xml_io import ButtonMapRootError, parse_buttonmap

log = logging.getLogger(__name__)


class ButtonMapError(Exception):
    """Raised when a :class:`ButtonMapper` is constructed without a client."""


class ButtonMapper:
    """Lazy, load-once resolver over a core's ``buttonmap.xml``.

    *client* reports the directory holding the core library (see
    :class:`~.client.LibretroClient`).  *logger* defaults to this module's
    logger.  One instance is meant to be shared for the lifetime of the
    running core; the file is read at most once, and a failed read is
    never retried.
    """

    def __init__(
        self,
        client,
        logger: logging.Logger | None = None,
        filename: str = BUTTONMAP_XML,
    ) -> None:
        if client is None:
            raise ButtonMapError("A libretro client is required")
        self._client = client
        self._log = logger or log
        self._filename = filename
        self._lock = threading.Lock()
        self._load_attempted = False
        self._buttonmap: MappingDocument | None = None

    # -- Load state --------------------------------------------------------

    @property
    def load_attempted(self) -> bool:
        return self._load_attempted

    @property
    def is_loaded(self) -> bool:
        return self._buttonmap is not None

    # -- Loading -----------------------------------------------------------

    def ensure_loaded(self) -> bool:
        """Load ``buttonmap.xml`` on first call.

        Returns ``True`` if a valid button map is resident.  Later calls
        return the remembered result without touching the disk, even if
        the first attempt failed.
        """
        if not self._load_attempted:
            with self._lock:
                if not self._load_attempted:
                    try:
                        self._buttonmap = self._read_buttonmap()
                    finally:
                        self._load_attempted = True
        return self._buttonmap is not None

    def _read_buttonmap(self) -> MappingDocument | None:
        directory = self._client.library_directory()
        if not directory:
            return None

        path = Path(directory) / self._filename
        self._log.info("Loading libretro buttonmap %s", path)

        try:
            return parse_buttonmap(path)
        except ButtonMapRootError:
            self._log.error("Can't find root <%s> tag", BUTTONMAP_XML_ROOT)
        except (OSError, ValueError, LookupError, ET.ParseError) as exc:
            self._log.error("Failed to read libretro buttonmap %s: %s", path, exc)
        return None

    # -- Node lookup -------------------------------------------------------

    def find_device(self, device_id: str) -> DeviceEntry | None:
        """Return the first ``<device>`` whose id is *device_id*.

        A ``<device>`` without an id ends the scan: entries after it are
        not considered.
        """
        if not self.ensure_loaded():
            return None

        devices = self._buttonmap.devices
        if not devices:
            self._log.error("Can't find <%s> tag", BUTTONMAP_XML_ELM_DEVICE)

        found: DeviceEntry | None = None
        for device in devices:
            if device.device_id is None:
                self._log.error(
                    '<%s> tag has no "%s" attribute',
                    BUTTONMAP_XML_ELM_DEVICE, BUTTONMAP_XML_ATTR_DEVICE_ID,
                )
                break
            if device.device_id == device_id:
                found = device
                break

        if found is None:
            self._log.error(
                'Can\'t find <%s> tag for device "%s"',
                BUTTONMAP_XML_ELM_DEVICE, device_id,
            )
        return found

    def find_feature(self, device_id: str, feature_name: str) -> FeatureEntry | None:
        """Return the first ``<feature>`` of *device_id* named *feature_name*.

        Same policy as :meth:`find_device` for a ``<feature>`` without a
        name.
        """
        device = self.find_device(device_id)
        if device is None:
            return None

        if not device.features:
            self._log.error(
                'Can\'t find <%s> tag for device "%s"',
                BUTTONMAP_XML_ELM_FEATURE, device_id,
            )

        found: FeatureEntry | None = None
        for feature in device.features:
            if feature.name is None:
                self._log.error(
                    '<%s> tag has no "%s" attribute',
                    BUTTONMAP_XML_ELM_FEATURE, BUTTONMAP_XML_ATTR_FEATURE_NAME,
                )
                break
            if feature.name == feature_name:
                found = feature
                break

        if found is None:
            self._log.error(
                'Can\'t find feature "%s" for device "%s"',
                feature_name, device_id,
            )
        return found

    # -- Public queries ----------------------------------------------------

    def device_type(self, device_id: str) -> int:
        """Return the ``RETRO_DEVICE_*`` type for *device_id*."""
        if device_id == DEFAULT_CONTROLLER_ID:
            return DEFAULT_CONTROLLER_TYPE

        device = self.find_device(device_id)
        if device is not None:
            if device.device_type is None:
                self._log.error(
                    '<%s> tag has no "%s" attribute',
                    BUTTONMAP_XML_ELM_DEVICE, BUTTONMAP_XML_ATTR_DEVICE_TYPE,
                )
            else:
                return translator.device_type(device.device_type)

        return RETRO_DEVICE_NONE

    def feature_index(self, device_id: str, feature_name: str) -> int:
        """Return the libretro button / axis index of a feature, or ``-1``.

        Features of the default controller missing from the built-in table
        are looked up in ``buttonmap.xml`` like any other device.
        """
        if device_id == DEFAULT_CONTROLLER_ID:
            index = DEFAULT_CONTROLLER_FEATURES.get(feature_name)
            if index is not None:
                return index

        feature = self.find_feature(device_id, feature_name)
        if feature is not None:
            if feature.mapto is None:
                self._log.error(
                    '<%s> tag has no "%s" attribute',
                    BUTTONMAP_XML_ELM_FEATURE, BUTTONMAP_XML_ATTR_FEATURE_MAPTO,
                )
            else:
                return translator.feature_index(feature.mapto)

        return RETRO_INDEX_NONE
