import pytest

from splatkit.lrp import (
    LrpError,
    LrpParameters,
    Polarization,
    RadioClimate,
    is_dielectric_const_or_conductivity,
    is_fraction,
    is_frequency,
    list_lrp_files,
)


def _params(**overrides):
    values = dict(
        dielectric_constant="15.000",
        conductivity="0.005",
        bending_constant="301.000",
        frequency="300.000",
        radio_climate=RadioClimate.CONTINENTAL_TEMPERATE,
        polarization=Polarization.VERTICAL,
        fraction_of_situations="0.50",
        fraction_of_time="0.90",
        effective_radiated_power="0",
    )
    values.update(overrides)
    return LrpParameters(**values)


@pytest.mark.parametrize(
    "text, expected",
    [("15.000", True), ("0.005", True), ("-3", True), ("1 2", False), ("a b c", False)],
)
def test_dielectric_const_or_conductivity(text, expected):
    assert is_dielectric_const_or_conductivity(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("20", True),
        ("20000", True),
        ("300.5", True),
        ("19.9", False),
        ("20001", False),
        ("abc", False),
        ("300 1", False),
    ],
)
def test_is_frequency(text, expected):
    assert is_frequency(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("0", True), ("1", True), ("0.5", True), ("1.1", False), ("-0.1", False), ("0 5", False)],
)
def test_is_fraction(text, expected):
    assert is_fraction(text) is expected


def test_is_fraction_accepts_non_numbers_as_zero():
    assert is_fraction("abc") is True


def test_to_text_layout():
    text = _params().to_text()
    lines = text.split("\n")
    assert text.endswith("\n")
    assert lines[:9] == [
        "15.000", "0.005", "301.000", "300.000", "5", "1", "0.50", "0.90", "0",
    ]


def test_round_trip_text():
    params = _params(radio_climate=RadioClimate.DESERT)
    assert LrpParameters.from_text(params.to_text()) == params


def test_from_text_rejects_bad_climate():
    text = _params().to_text().replace("\n5\n", "\n9\n", 1)
    with pytest.raises(LrpError):
        LrpParameters.from_text(text)


def test_from_text_rejects_bad_polarization():
    lines = _params().to_text().split("\n")
    lines[5] = "x"
    with pytest.raises(LrpError):
        LrpParameters.from_text("\n".join(lines))


def test_from_text_missing_power_is_empty():
    lines = _params().to_text().split("\n")[:8]
    params = LrpParameters.from_text("\n".join(lines))
    assert params.effective_radiated_power == ""
    assert params.fraction_of_time == "0.90"


def test_validate_accepts_good_parameters():
    params = _params()
    params.validate()
    assert params.frequency == "300.000"


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("dielectric_constant", "1 5", "dielectric"),
        ("conductivity", "0 005", "conductivity"),
        ("bending_constant", "3 01", "bending"),
        ("frequency", "10", "frequency"),
        ("fraction_of_situations", "2", "situations"),
        ("fraction_of_time", "2", "time"),
        ("effective_radiated_power", "1 0", "power"),
    ],
)
def test_validate_errors(field, value, message):
    with pytest.raises(LrpError, match=message):
        _params(**{field: value}).validate()


def test_save_and_load(tmp_path):
    path = tmp_path / "site.lrp"
    params = _params()
    params.save(path)
    assert path.read_text(encoding="utf-8") == params.to_text()
    assert LrpParameters.load(path) == params


def test_save_invalid_writes_nothing(tmp_path):
    path = tmp_path / "bad.lrp"
    with pytest.raises(LrpError):
        _params(frequency="5").save(path)
    assert not path.exists()


def test_load_missing_file(tmp_path):
    with pytest.raises(LrpError, match="File is not exist"):
        LrpParameters.load(tmp_path / "missing.lrp")


def test_list_lrp_files(tmp_path):
    for name in ("b.lrp", "A.lrp", "c.qth", "notes.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "dir.lrp").mkdir()
    assert list_lrp_files(tmp_path) == ["A.lrp", "b.lrp"]


def test_list_lrp_files_missing_directory(tmp_path):
    assert list_lrp_files(tmp_path / "nowhere") == []