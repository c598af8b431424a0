"""Irregular terrain model parameter (``.lrp``) files.

An ``.lrp`` file holds nine lines, in this order: earth dielectric
constant, earth conductivity, atmospheric bending constant, frequency in
MHz, radio climate code (1-7), polarization code (0 horizontal,
1 vertical), fraction of situations, fraction of time and effective
radiated power.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from splatkit.coordinates import _to_float

__all__ = [
    "LrpError",
    "RadioClimate",
    "Polarization",
    "LrpParameters",
    "is_dielectric_const_or_conductivity",
    "is_frequency",
    "is_fraction",
    "list_lrp_files",
]

PathLike = Union[str, Path]

LRP_SUFFIX = ".lrp"
MIN_FREQUENCY_MHZ = 20
MAX_FREQUENCY_MHZ = 20000


class LrpError(ValueError):
    """Raised when model parameters or an ``.lrp`` file are invalid."""


class RadioClimate(enum.IntEnum):
    """Radio climate codes as written in an ``.lrp`` file."""

    EQUATORIAL = 1
    CONTINENTAL_SUBTROPICAL = 2
    MARITIME_SUBTROPICAL = 3
    DESERT = 4
    CONTINENTAL_TEMPERATE = 5
    MARITIME_TEMPERATE_OVER_LAND = 6
    MARITIME_TEMPERATE_OVER_SEA = 7


class Polarization(enum.IntEnum):
    """Antenna polarization codes as written in an ``.lrp`` file."""

    HORIZONTAL = 0
    VERTICAL = 1


def _single_token(text: str) -> bool:
    return len(text.split(" ")) == 1


def is_dielectric_const_or_conductivity(text: str) -> bool:
    """Return True if ``text`` is a single token without spaces.

    Dielectric constant, conductivity, bending constant and radiated power
    are only checked for being one field.
    """
    return _single_token(text)


def is_frequency(text: str) -> bool:
    """Return True if ``text`` is a single value between 20 and 20000 MHz."""
    if not _single_token(text):
        return False
    return MIN_FREQUENCY_MHZ <= _to_float(text) <= MAX_FREQUENCY_MHZ


def is_fraction(text: str) -> bool:
    """Return True if ``text`` is a single value in [0, 1].

    Text that is not a number reads as zero and is therefore accepted.
    """
    if not _single_token(text):
        return False
    return 0 <= _to_float(text) <= 1


def _parse_code(text: str, kind: type[enum.IntEnum], label: str) -> enum.IntEnum:
    try:
        return kind(int(text.strip()))
    except ValueError:
        raise LrpError(f"Invalid {label} value: {text!r}") from None


@dataclass
class LrpParameters:
    """The contents of one ``.lrp`` file."""

    dielectric_constant: str = ""
    conductivity: str = ""
    bending_constant: str = ""
    frequency: str = ""
    radio_climate: RadioClimate = RadioClimate.EQUATORIAL
    polarization: Polarization = Polarization.HORIZONTAL
    fraction_of_situations: str = ""
    fraction_of_time: str = ""
    effective_radiated_power: str = ""

    def validate(self) -> None:
        """Raise LrpError naming the first invalid parameter."""
        checks = (
            (is_dielectric_const_or_conductivity, self.dielectric_constant,
             "Invalid dielectric constant value"),
            (is_dielectric_const_or_conductivity, self.conductivity,
             "Invalid conductivity value"),
            (is_dielectric_const_or_conductivity, self.bending_constant,
             "Invalid atmospheric bending constant value"),
            (is_frequency, self.frequency, "Invalid frequency value"),
            (is_fraction, self.fraction_of_situations,
             "Invalid fraction of situations value"),
            (is_fraction, self.fraction_of_time, "Invalid fraction of time value"),
            (is_dielectric_const_or_conductivity, self.effective_radiated_power,
             "Invalid effective radiated power value"),
        )
        for check, value, message in checks:
            if not check(value.strip()):
                raise LrpError(message)

    def to_text(self) -> str:
        """Return the file contents, one parameter per line."""
        fields = (
            self.dielectric_constant,
            self.conductivity,
            self.bending_constant,
            self.frequency,
            str(int(self.radio_climate)),
            str(int(self.polarization)),
            self.fraction_of_situations,
            self.fraction_of_time,
            self.effective_radiated_power,
        )
        return "".join(f"{value}\n" for value in fields)

    @classmethod
    def from_text(cls, text: str) -> "LrpParameters":
        """Parse file contents; missing text lines read as empty."""
        lines = text.split("\n")
        line = lambda index: lines[index] if index < len(lines) else ""  # noqa: E731
        return cls(
            dielectric_constant=line(0),
            conductivity=line(1),
            bending_constant=line(2),
            frequency=line(3),
            radio_climate=_parse_code(line(4), RadioClimate, "radio climate"),
            polarization=_parse_code(line(5), Polarization, "polarization"),
            fraction_of_situations=line(6),
            fraction_of_time=line(7),
            effective_radiated_power=line(8),
        )

    @classmethod
    def load(cls, path: PathLike) -> "LrpParameters":
        """Read and parse an ``.lrp`` file."""
        path = Path(path)
        if not path.is_file():
            raise LrpError("File is not exist")
        return cls.from_text(path.read_text(encoding="utf-8"))

    def save(self, path: PathLike) -> None:
        """Validate the parameters and write them to ``path``."""
        self.validate()
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(self.to_text())
        except OSError as exc:
            raise LrpError(f"File not found: {path}") from exc


def list_lrp_files(directory: PathLike) -> list[str]:
    """Return the names of ``.lrp`` files in ``directory``, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    names = [
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix.lower() == LRP_SUFFIX
    ]
    return sorted(names, key=lambda name: (name.lower(), name))