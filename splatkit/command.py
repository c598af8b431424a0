"""Assembly of the command-line arguments for the propagation tool.

A :class:`SplatOptions` holds every choice the user can make for a run.
:meth:`SplatOptions.build` turns it into the argument list, in the order
the tool expects.  :meth:`SplatOptions.preview_image` names the graphic a
run will produce.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Optional, Union

from splatkit.coordinates import _to_float

__all__ = [
    "CommandError",
    "GraphicMode",
    "SplatOptions",
    "default_output_name",
]

MAX_TRANSMITTERS = 4
MAX_CITY_FILES = 5
MAX_BOUNDARY_FILES = 5
MIN_FREQUENCY_MHZ = 20
MAX_FREQUENCY_MHZ = 20000


class CommandError(ValueError):
    """Raised when the options cannot form a valid command."""


class GraphicMode(str, enum.Enum):
    """Profile graphics the tool can draw, valued by their flag."""

    TERRAIN_PROFILE = "-p"
    ELEVATION_PROFILE = "-e"
    HEIGHT_PROFILE = "-h"
    NORMALIZED_HEIGHT_PROFILE = "-H"
    PATH_LOSS_PROFILE = "-l"

    @property
    def default_name(self) -> str:
        """The output name offered when the graphic is first enabled."""
        return _DEFAULT_NAMES[self.value]


_DEFAULT_NAMES = {
    "-p": "terrain_profile",
    "-e": "elevation_profile",
    "-h": "height_profile",
    "-H": "normalized_height_profile",
    "-l": "path_loss_profile",
    "-o": "topographic_map",
    "-ano": "pathloss",
    "-log": "log_file",
}


def default_output_name(flag: Union[str, GraphicMode]) -> str:
    """Return the default output file name (without extension) for ``flag``."""
    key = flag.value if isinstance(flag, GraphicMode) else flag
    try:
        return _DEFAULT_NAMES[key]
    except KeyError:
        raise CommandError(f"No default output name for {key!r}") from None


def _join(directory: str, name: str) -> str:
    return os.path.join(directory, name) if directory else name


def _present(values: list[str]) -> list[str]:
    return [value for value in values if value and value != "None"]


@dataclass
class SplatOptions:
    """Every option of one propagation run.

    Site names (transmitters, receiver, the ``-ani`` file and the ``-ano``
    and ``-log`` outputs) are relative to ``site_dir``; graphics and the map
    are written to ``graphic_dir``.  City, boundary and user terrain files
    are given as full paths.  An option left as ``None`` is not passed.
    """

    transmitters: list[str]
    site_dir: str = ""
    sdf_dir: str = ""
    graphic_dir: str = ""
    receiver: Optional[str] = None
    city_files: list[str] = field(default_factory=list)
    boundary_files: list[str] = field(default_factory=list)
    user_terrain_file: Optional[str] = None
    graphics: dict[GraphicMode, str] = field(default_factory=dict)
    graphic_extension: str = ".png"
    frequency: Optional[str] = None
    erp: Optional[str] = None
    fresnel_zone: Optional[str] = None
    ground_clutter: Optional[str] = None
    db_threshold: Optional[str] = None
    coverage_height: Optional[str] = None
    path_loss_height: Optional[str] = None
    radius: Optional[str] = None
    map_output: Optional[str] = None
    map_extension: str = ".ppm"
    alphanumeric_output: Optional[str] = None
    alphanumeric_extension: str = ".dat"
    alphanumeric_input: Optional[str] = None
    earth_multiplier: Optional[str] = None
    metric: bool = False
    log_output: Optional[str] = None
    log_extension: str = ".txt"
    keep_plot_files: bool = False
    no_los_path: bool = False
    no_los_coverage: bool = False
    no_fresnel: bool = False
    no_greyscale: bool = False
    dbm: bool = False
    geo: bool = False
    kml: bool = False
    old_itm: bool = False

    def _graphic_path(self, mode: GraphicMode) -> str:
        return _join(self.graphic_dir, self.graphics[mode] + self.graphic_extension)

    def _map_path(self) -> str:
        return _join(self.graphic_dir, (self.map_output or "") + self.map_extension)

    def _check(self) -> tuple[list[str], list[str], list[str]]:
        transmitters = _present(list(self.transmitters))
        if not transmitters:
            raise CommandError("At least one transmitter is required")
        if len(transmitters) > MAX_TRANSMITTERS:
            raise CommandError(f"At most {MAX_TRANSMITTERS} transmitters are allowed")
        cities = _present(list(self.city_files))
        if len(cities) > MAX_CITY_FILES:
            raise CommandError(f"At most {MAX_CITY_FILES} city files are allowed")
        boundaries = _present(list(self.boundary_files))
        if len(boundaries) > MAX_BOUNDARY_FILES:
            raise CommandError(
                f"At most {MAX_BOUNDARY_FILES} cartographic boundary files are allowed"
            )
        if self.frequency is not None:
            value = _to_float(self.frequency)
            if not MIN_FREQUENCY_MHZ <= value <= MAX_FREQUENCY_MHZ:
                raise CommandError("Invalid frequency value")
        return transmitters, cities, boundaries

    def build(self) -> list[str]:
        """Return the argument list; raise CommandError if options are invalid."""
        transmitters, cities, boundaries = self._check()
        args = ["-d", self.sdf_dir, "-t"]
        args.extend(_join(self.site_dir, name) for name in transmitters)
        if self.receiver and self.receiver != "None":
            args += ["-r", _join(self.site_dir, self.receiver)]
        if cities:
            args += ["-s", *cities]
        if boundaries:
            args += ["-b", *boundaries]
        if self.user_terrain_file is not None:
            args += ["-udt", self.user_terrain_file]
        for mode in GraphicMode:
            if mode in self.graphics:
                args += [mode.value, self._graphic_path(mode)]
        valued = (
            ("-f", self.frequency),
            ("-erp", self.erp),
            ("-fz", self.fresnel_zone),
            ("-gc", self.ground_clutter),
            ("-db", self.db_threshold),
            ("-c", self.coverage_height),
            ("-L", self.path_loss_height),
            ("-R", self.radius),
        )
        for flag, value in valued:
            if value is not None:
                args += [flag, value]
        if self.map_output is not None:
            args += ["-o", self._map_path()]
        if self.alphanumeric_output is not None:
            args += [
                "-ano",
                _join(self.site_dir, self.alphanumeric_output + self.alphanumeric_extension),
            ]
        if self.alphanumeric_input is not None:
            args += ["-ani", _join(self.site_dir, self.alphanumeric_input)]
        if self.earth_multiplier is not None:
            args += ["-m", self.earth_multiplier]
        if self.metric:
            args.append("-metric")
        if self.log_output is not None:
            args += ["-log", _join(self.site_dir, self.log_output + self.log_extension)]
        switches = (
            ("-gpsav", self.keep_plot_files),
            ("-n", self.no_los_path),
            ("-N", self.no_los_coverage),
            ("-nf", self.no_fresnel),
            ("-ngs", self.no_greyscale),
            ("-dbm", self.dbm),
            ("-geo", self.geo),
            ("-kml", self.kml),
            ("-oldtim", self.old_itm),
        )
        args.extend(flag for flag, enabled in switches if enabled)
        return args

    def preview_image(self) -> Optional[str]:
        """Return the path of the graphic the run produces, or None.

        A map (``-o``, or any of the coverage options ``-c``, ``-L`` and
        ``-R``) takes precedence over the profile graphics, which are tried
        in flag order.
        """
        map_like = (
            self.map_output is not None
            or self.coverage_height is not None
            or self.path_loss_height is not None
            or self.radius is not None
        )
        if map_like:
            return self._map_path()
        for mode in GraphicMode:
            if mode in self.graphics:
                return self._graphic_path(mode)
        return None