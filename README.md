# splatkit

splatkit helps you prepare runs of the SPLAT! RF signal propagation and
terrain analysis tool. It checks and converts coordinates, reads and writes
Longley-Rice parameter (`.lrp`) files, assembles the argument list for a run
and lists the files of a working directory. It never runs SPLAT! itself.

Modules:

- `splatkit.coordinates`: validate and convert latitude and longitude
  values written in decimal degrees (`45.5`) or as degrees, minutes and
  seconds (`45 30 0`).
- `splatkit.lrp`: the nine-line `.lrp` parameter files.
- `splatkit.command`: turn chosen options into a SPLAT! argument list.
- `splatkit.catalog`: list site, graphic, text and `.dat` files.
- `splatkit.zoom`: wheel zooming about the pointer for a picture viewer.
- `splatkit.cli`: the `splatkit` command.

## Installing

```
pip install splatkit
```

For running the tests:

```
pip install "splatkit[test]"
pytest
```

## Coordinates

```python
from splatkit.coordinates import dd_to_dms, dms_to_dd, is_latitude, is_longitude

dd_to_dms("45.5")          # "45 30 0"
dms_to_dd("45 30 0")       # "45.5"

is_latitude("91")          # False: latitude stays within 0..90
is_longitude("179 59 59")  # True
```

Values are checked without a sign; the hemisphere is carried separately.
`is_dd_format`, `is_dms_format` and `is_not_empty` are also available.

## Longley-Rice parameters

```python
from splatkit.lrp import LrpParameters, LrpError, list_lrp_files

params = LrpParameters.load("station.lrp")
try:
    params.validate()
except LrpError as err:
    print("invalid:", err)
else:
    params.save("copy.lrp")

print(list_lrp_files("."))
```

`LrpParameters` holds the dielectric constant, conductivity, atmospheric
bending constant, frequency, `RadioClimate`, `Polarization`, fractions of
situations and of time, and effective radiated power. `validate()` raises
`LrpError` naming the first bad value; frequencies must lie between 20 and
20000 MHz and both fractions between 0 and 1. `save()` validates before
writing, and `to_text()` / `from_text()` give and read the file content.

## Building a SPLAT! argument list

```python
from splatkit.command import GraphicMode, SplatOptions

options = SplatOptions(
    transmitters=["tx.qth"],
    site_dir="sites",
    sdf_dir="sdf",
    graphics={GraphicMode.TERRAIN_PROFILE: "terrain_profile"},
    frequency="450",
)
options.build()
# ['-d', 'sdf', '-t', 'sites/tx.qth', '-p', 'terrain_profile.png', '-f', '450']
options.preview_image()
# 'terrain_profile.png'
```

`build()` raises `CommandError` when there is no transmitter, more than four
transmitters, more than five city or boundary files, or a frequency outside
20..20000 MHz. `preview_image()` names the map when one is produced (`-o`,
`-c`, `-L` or `-R`), otherwise the first profile graphic, otherwise `None`.
`default_output_name(flag)` gives the suggested name for `-p`, `-e`, `-h`,
`-H`, `-l`, `-o`, `-ano` and `-log`.

## Workspace files

```python
from splatkit.catalog import FileCatalog, list_graphic_files

catalog = FileCatalog("sites", "graphics")
catalog.site_files()     # .qth files
catalog.graphic_files()  # .png, .ppm, .ps and .gif files
catalog.text_files()     # .txt files
catalog.dat_files()      # .dat files
catalog.refresh()        # re-scan, keeping the order files were first seen
```

## Zooming

```python
from splatkit.zoom import Modifiers, ZoomController

zoom = ZoomController(800, 600)
zoom.set_modifiers(Modifiers.NONE)
zoom.mouse_move((100, 100))
zoom.wheel(120)  # True: scaled by 1.0015 ** 120 about the pointer
```

By default the wheel zooms only while Control is held.

## Command-line tool

Print the argument list of a run as a shell command line:

```
splatkit command -t tx.qth --site-dir sites --sdf-dir sdf --terrain-profile --frequency 450
```

prints `splat -d sdf -t sites/tx.qth -p terrain_profile.png -f 450`. Add
`--preview` to print the path of the graphic the run would produce instead.
Graphic options are `--terrain-profile`, `--elevation-profile`,
`--height-profile`, `--normalized-height-profile` and `--path-loss-profile`;
`splatkit command --help` lists all the rest.

List workspace files (`sites`, `graphics`, `texts` or `dats`):

```
splatkit files graphics --site-dir sites --graphic-dir graphics
```

## What it does not do

splatkit has no graphical interface and does not start SPLAT!: it prints the
command line for you to run. It does not read or edit city (site list)
files or `.qth` site files; it only lists the `.qth` files it finds.