"""``buttonmap.xml`` deserialization.

The document maps Kodi-style controller profiles onto libretro device types
and button indices::

    <buttonmap>
      <device deviceid="game.controller.snes" type="joypad">
        <feature name="a" mapto="a"/>
      </device>
    </buttonmap>

Parsing is structural only.  Required attributes are not checked here; a
missing attribute is carried through as ``None`` so the lookup code can
react to it at the point it is scanned.
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree as ET

from .models import (
    BUTTONMAP_XML_ATTR_DEVICE_ID,
    BUTTONMAP_XML_ATTR_DEVICE_TYPE,
    BUTTONMAP_XML_ATTR_FEATURE_MAPTO,
    BUTTONMAP_XML_ATTR_FEATURE_NAME,
    BUTTONMAP_XML_ELM_DEVICE,
    BUTTONMAP_XML_ELM_FEATURE,
    BUTTONMAP_XML_ROOT,
    DeviceEntry,
    FeatureEntry,
    MappingDocument,
)


class ButtonMapRootError(ValueError):
    """The document root is not a non-empty ``<buttonmap>`` element."""


def parse_buttonmap(source: str | Path) -> MappingDocument:
    """Parse a button map into a :class:`MappingDocument`.

    *source* may be a file path or an XML string.

    Raises :class:`OSError` if the file can't be read,
    :class:`xml.etree.ElementTree.ParseError` on malformed XML and
    :class:`ButtonMapRootError` if the root isn't a non-empty ``<buttonmap>``.
    Comments and text count as content, so ``<buttonmap><!-- x --></buttonmap>``
    is accepted but holds no devices.
    """
    if isinstance(source, Path) or not source.lstrip().startswith("<"):
        root = ET.parse(str(source), parser=_parser()).getroot()
    else:
        root = ET.fromstring(source, parser=_parser())

    if root.tag != BUTTONMAP_XML_ROOT or not _has_content(root):
        raise ButtonMapRootError(f"Can't find root <{BUTTONMAP_XML_ROOT}> tag")

    return MappingDocument(
        devices=tuple(
            _parse_device(node) for node in root.findall(BUTTONMAP_XML_ELM_DEVICE)
        ),
    )


def _parse_device(node: ET.Element) -> DeviceEntry:
    return DeviceEntry(
        device_id=node.get(BUTTONMAP_XML_ATTR_DEVICE_ID),
        device_type=node.get(BUTTONMAP_XML_ATTR_DEVICE_TYPE),
        features=tuple(
            FeatureEntry(
                name=fnode.get(BUTTONMAP_XML_ATTR_FEATURE_NAME),
                mapto=fnode.get(BUTTONMAP_XML_ATTR_FEATURE_MAPTO),
            )
            for fnode in node.findall(BUTTONMAP_XML_ELM_FEATURE)
        ),
    )


def _parser() -> ET.XMLParser:
    return ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))


def _has_content(root: ET.Element) -> bool:
    return len(root) > 0 or bool((root.text or "").strip())
