"""Handle for the libretro core a game is running on."""

from __future__ import annotations

from pathlib import Path


class LibretroClient:
    """A libretro core library on disk.

    Only the location matters here: ``buttonmap.xml`` ships next to the
    core (e.g. ``cores/snes9x_libretro.dll`` → ``cores/buttonmap.xml``).
    """

    def __init__(self, library_path: str | Path | None = None) -> None:
        self.library_path = Path(library_path) if library_path else None

    def library_directory(self) -> str:
        """Directory containing the core, or ``""`` if no core is set."""
        if self.library_path is None:
            return ""
        return str(self.library_path.parent)

    def __repr__(self) -> str:
        return f"LibretroClient({self.library_path!r})"
