"""Listings of the working files a propagation run reads and writes.

Site (``.qth``), text report (``.txt``) and alphanumeric (``.dat``) files
live in the site directory; graphics (``.png``, ``.ppm``, ``.ps`` and
``.gif``) live in the graphic directory.  A :class:`FileCatalog` keeps the
order in which files were first seen across refreshes: files that are gone
are dropped and new ones are appended.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Optional, Union

__all__ = ["FileCatalog", "list_files", "list_graphic_files"]

PathLike = Union[str, Path]

SITE_PATTERNS = ("*.qth",)
GRAPHIC_PATTERNS = ("*.png", "*.ppm", "*.ps", "*.gif")
TEXT_PATTERNS = ("*.txt",)
DAT_PATTERNS = ("*.dat",)


def list_files(directory: PathLike, patterns: Union[str, Iterable[str]]) -> list[str]:
    """Return names of regular files in ``directory`` matching any pattern.

    Patterns are shell globs matched without regard to case.  Names are
    sorted case-insensitively.  A missing directory yields an empty list.
    """
    if isinstance(patterns, str):
        patterns = (patterns,)
    lowered = [pattern.lower() for pattern in patterns]
    directory = Path(directory)
    if not directory.is_dir():
        return []
    names = [
        entry.name
        for entry in directory.iterdir()
        if entry.is_file()
        and any(fnmatchcase(entry.name.lower(), pattern) for pattern in lowered)
    ]
    return sorted(names, key=lambda name: (name.lower(), name))


def list_graphic_files(directory: PathLike) -> list[str]:
    """Return graphic file names: PNG first, then PPM, PostScript and GIF."""
    names: list[str] = []
    seen: set[str] = set()
    for pattern in GRAPHIC_PATTERNS:
        for name in list_files(directory, pattern):
            if name not in seen:
                seen.add(name)
                names.append(name)
    return names


def _merge(current: list[str], found: list[str]) -> list[str]:
    """Keep known names still present, then append newly found ones."""
    present = set(found)
    kept = [name for name in current if name in present]
    known = set(kept)
    kept.extend(name for name in found if name not in known)
    return kept


@dataclass
class FileCatalog:
    """Tracks the site, graphic, text and alphanumeric files of a workspace.

    ``graphic_dir`` defaults to ``site_dir``.  The catalog is refreshed on
    creation.
    """

    site_dir: PathLike
    graphic_dir: Optional[PathLike] = None
    _sites: list[str] = field(default_factory=list, init=False, repr=False)
    _graphics: list[str] = field(default_factory=list, init=False, repr=False)
    _texts: list[str] = field(default_factory=list, init=False, repr=False)
    _dats: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.graphic_dir is None:
            self.graphic_dir = self.site_dir
        self.refresh()

    def refresh(self) -> None:
        """Re-scan the directories, dropping vanished files and adding new ones."""
        self._sites = _merge(self._sites, list_files(self.site_dir, SITE_PATTERNS))
        self._graphics = _merge(self._graphics, list_graphic_files(self.graphic_dir))
        self._texts = _merge(self._texts, list_files(self.site_dir, TEXT_PATTERNS))
        self._dats = _merge(self._dats, list_files(self.site_dir, DAT_PATTERNS))

    def site_files(self) -> list[str]:
        """Return the ``.qth`` site file names."""
        return list(self._sites)

    def graphic_files(self) -> list[str]:
        """Return the graphic file names."""
        return list(self._graphics)

    def text_files(self) -> list[str]:
        """Return the ``.txt`` report file names."""
        return list(self._texts)

    def dat_files(self) -> list[str]:
        """Return the ``.dat`` alphanumeric file names."""
        return list(self._dats)