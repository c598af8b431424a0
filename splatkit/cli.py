"""Command line entry point.

``splatkit command`` assembles the argument list of a propagation run from
the options given and prints it as a shell command line, or prints the
path of the graphic the run would produce.  ``splatkit files`` lists the
site, graphic, text report and alphanumeric files of a workspace.
"""

from __future__ import annotations

import argparse
import shlex
import sys
from typing import Optional, Sequence

from splatkit.catalog import FileCatalog
from splatkit.command import (
    CommandError,
    GraphicMode,
    SplatOptions,
    default_output_name,
)

__all__ = ["main"]

PROGRAM_NAME = "splatkit"
TOOL_NAME = "splat"

_VALUED_OPTIONS = (
    ("--frequency", "frequency", "MHz value passed with -f (20 to 20000)"),
    ("--erp", "erp", "effective radiated power passed with -erp"),
    ("--fresnel-zone", "fresnel_zone", "Fresnel zone clearance passed with -fz"),
    ("--ground-clutter", "ground_clutter", "ground clutter height passed with -gc"),
    ("--db", "db_threshold", "signal threshold passed with -db"),
    ("--coverage-height", "coverage_height", "receiver height for -c coverage"),
    ("--path-loss-height", "path_loss_height", "receiver height for -L path loss"),
    ("--radius", "radius", "maximum coverage radius passed with -R"),
    ("--earth-multiplier", "earth_multiplier", "earth radius multiplier passed with -m"),
)

_SWITCHES = (
    ("--metric", "metric", "use metric units (-metric)"),
    ("--keep-plot-files", "keep_plot_files", "keep plotting files (-gpsav)"),
    ("--no-los-path", "no_los_path", "line-of-sight path analysis off (-n)"),
    ("--no-los-coverage", "no_los_coverage", "line-of-sight coverage off (-N)"),
    ("--no-fresnel", "no_fresnel", "do not plot Fresnel zones (-nf)"),
    ("--no-greyscale", "no_greyscale", "no terrain greyscale (-ngs)"),
    ("--dbm", "dbm", "plot signal power in dBm (-dbm)"),
    ("--geo", "geo", "write a georeference file (-geo)"),
    ("--kml", "kml", "write a KML file (-kml)"),
    ("--old-itm", "old_itm", "use the older propagation model (-oldtim)"),
)

_FILE_KINDS = {
    "sites": FileCatalog.site_files,
    "graphics": FileCatalog.graphic_files,
    "texts": FileCatalog.text_files,
    "dats": FileCatalog.dat_files,
}


def _graphic_option(mode: GraphicMode) -> str:
    return "--" + mode.name.lower().replace("_", "-")


def _add_command_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "command", help="print the argument list of a propagation run"
    )
    parser.add_argument("-t", "--transmitter", action="append", required=True,
                        dest="transmitters", metavar="QTH",
                        help="transmitter site file (up to four)")
    parser.add_argument("-r", "--receiver", metavar="QTH", help="receiver site file")
    parser.add_argument("--site-dir", default="", help="directory of site files")
    parser.add_argument("--sdf-dir", default="", help="directory of terrain data")
    parser.add_argument("--graphic-dir", default="", help="directory for graphics")
    parser.add_argument("-s", "--city", action="append", default=[],
                        dest="city_files", metavar="FILE",
                        help="city file (up to five)")
    parser.add_argument("-b", "--boundary", action="append", default=[],
                        dest="boundary_files", metavar="FILE",
                        help="cartographic boundary file (up to five)")
    parser.add_argument("--udt", dest="user_terrain_file", metavar="FILE",
                        help="user-defined terrain file")
    for mode in GraphicMode:
        parser.add_argument(_graphic_option(mode), dest=mode.name, nargs="?",
                            const=mode.default_name, default=None, metavar="NAME",
                            help=f"draw this graphic ({mode.value})")
    parser.add_argument("--graphic-extension", default=".png",
                        help="extension of profile graphics")
    for option, dest, text in _VALUED_OPTIONS:
        parser.add_argument(option, dest=dest, metavar="VALUE", help=text)
    parser.add_argument("--map", dest="map_output", nargs="?",
                        const=default_output_name("-o"), metavar="NAME",
                        help="write a topographic map (-o)")
    parser.add_argument("--map-extension", default=".ppm",
                        help="extension of the map")
    parser.add_argument("--ano", dest="alphanumeric_output", nargs="?",
                        const=default_output_name("-ano"), metavar="NAME",
                        help="write alphanumeric output (-ano)")
    parser.add_argument("--ano-extension", dest="alphanumeric_extension",
                        default=".dat", help="extension of alphanumeric output")
    parser.add_argument("--ani", dest="alphanumeric_input", metavar="FILE",
                        help="read alphanumeric input (-ani)")
    parser.add_argument("--log", dest="log_output", nargs="?",
                        const=default_output_name("-log"), metavar="NAME",
                        help="write a log file (-log)")
    parser.add_argument("--log-extension", default=".txt",
                        help="extension of the log file")
    for option, dest, text in _SWITCHES:
        parser.add_argument(option, dest=dest, action="store_true", help=text)
    parser.add_argument("--preview", action="store_true",
                        help="print the graphic the run produces instead")


def _add_files_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("files", help="list workspace files")
    parser.add_argument("kind", choices=sorted(_FILE_KINDS), help="kind of file")
    parser.add_argument("--site-dir", default=".", help="directory of site files")
    parser.add_argument("--graphic-dir", default=None,
                        help="directory of graphics (defaults to the site directory)")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Prepare propagation runs and manage their files.",
    )
    subparsers = parser.add_subparsers(dest="action", required=True)
    _add_command_parser(subparsers)
    _add_files_parser(subparsers)
    return parser


def _options(args: argparse.Namespace) -> SplatOptions:
    graphics = {
        mode: getattr(args, mode.name)
        for mode in GraphicMode
        if getattr(args, mode.name) is not None
    }
    fields = {dest: getattr(args, dest) for _, dest, _ in _VALUED_OPTIONS}
    fields.update({dest: getattr(args, dest) for _, dest, _ in _SWITCHES})
    return SplatOptions(
        transmitters=args.transmitters,
        site_dir=args.site_dir,
        sdf_dir=args.sdf_dir,
        graphic_dir=args.graphic_dir,
        receiver=args.receiver,
        city_files=args.city_files,
        boundary_files=args.boundary_files,
        user_terrain_file=args.user_terrain_file,
        graphics=graphics,
        graphic_extension=args.graphic_extension,
        map_output=args.map_output,
        map_extension=args.map_extension,
        alphanumeric_output=args.alphanumeric_output,
        alphanumeric_extension=args.alphanumeric_extension,
        alphanumeric_input=args.alphanumeric_input,
        log_output=args.log_output,
        log_extension=args.log_extension,
        **fields,
    )


def _run_command(args: argparse.Namespace) -> int:
    options = _options(args)
    try:
        command = options.build()
    except CommandError as exc:
        print(f"{PROGRAM_NAME}: error: {exc}", file=sys.stderr)
        return 1
    if args.preview:
        image = options.preview_image()
        if image is None:
            print(f"{PROGRAM_NAME}: error: the run produces no graphic", file=sys.stderr)
            return 1
        print(image)
        return 0
    print(shlex.join([TOOL_NAME, *command]))
    return 0


def _run_files(args: argparse.Namespace) -> int:
    catalog = FileCatalog(args.site_dir, args.graphic_dir)
    for name in _FILE_KINDS[args.kind](catalog):
        print(name)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.action == "command":
        return _run_command(args)
    return _run_files(args)


if __name__ == "__main__":
    raise SystemExit(main())