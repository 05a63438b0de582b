"""Meridian emulator extensions.

Each sub-package (e.g. ``libretro``) adapts Meridian's input model to one
emulator backend.  The ``libretro`` extension answers, per running core::

    mapper = ButtonMapper(LibretroClient(core_path))
    mapper.device_type(controller_id) -> int
    mapper.feature_index(controller_id, feature_name) -> int

``controller_id`` is a controller profile id such as
``game.controller.snes``; ``feature_name`` is a button or stick name such
as ``a`` or ``leftstick``.  Unresolvable lookups return
``RETRO_DEVICE_NONE`` / ``-1`` rather than raising.
"""
