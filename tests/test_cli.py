import os
import shlex

import pytest

from splatkit.cli import main


def _command(capsys, *argv):
    status = main(["command", *argv])
    out = capsys.readouterr().out
    return status, shlex.split(out)


def test_minimal_command(capsys):
    status, words = _command(capsys, "-t", "tx.qth", "--sdf-dir", "sdf",
                             "--site-dir", "sites")
    assert status == 0
    assert words == ["splat", "-d", "sdf", "-t", os.path.join("sites", "tx.qth")]


def test_several_transmitters_and_receiver(capsys):
    status, words = _command(capsys, "-t", "a.qth", "-t", "b.qth", "-r", "rx.qth")
    assert status == 0
    assert words[words.index("-t") + 1:words.index("-t") + 3] == ["a.qth", "b.qth"]
    assert words[words.index("-r") + 1] == "rx.qth"


def test_none_receiver_is_left_out(capsys):
    status, words = _command(capsys, "-t", "a.qth", "-r", "None")
    assert status == 0
    assert "-r" not in words


def test_city_and_boundary_files_follow_one_flag(capsys):
    status, words = _command(capsys, "-t", "a.qth", "-s", "c1", "-s", "c2",
                             "-b", "b1")
    assert status == 0
    assert words.count("-s") == 1
    s = words.index("-s")
    assert words[s + 1:s + 3] == ["c1", "c2"]
    assert words[words.index("-b") + 1] == "b1"


def test_terrain_profile_default_name(capsys):
    status, words = _command(capsys, "-t", "a.qth", "--terrain-profile",
                             "--graphic-dir", "g")
    assert status == 0
    assert words[words.index("-p") + 1] == os.path.join("g", "terrain_profile.png")


def test_switches_in_source_order(capsys):
    status, words = _command(capsys, "-t", "a.qth", "--kml", "--metric", "--dbm")
    assert status == 0
    assert words.index("-metric") < words.index("-dbm") < words.index("-kml")


def test_invalid_frequency_is_an_error(capsys):
    status = main(["command", "-t", "a.qth", "--frequency", "5"])
    captured = capsys.readouterr()
    assert status == 1
    assert "Invalid frequency value" in captured.err
    assert captured.out == ""


def test_valid_frequency_is_passed(capsys):
    status, words = _command(capsys, "-t", "a.qth", "--frequency", "446")
    assert status == 0
    assert words[words.index("-f") + 1] == "446"


def test_too_many_transmitters(capsys):
    argv = ["command"]
    for name in ("a", "b", "c", "d", "e"):
        argv += ["-t", f"{name}.qth"]
    assert main(argv) == 1
    assert "transmitters" in capsys.readouterr().err


def test_preview_of_map(capsys):
    status = main(["command", "-t", "a.qth", "--map", "--graphic-dir", "g",
                   "--preview"])
    out = capsys.readouterr().out.strip()
    assert status == 0
    assert out == os.path.join("g", "topographic_map.ppm")


def test_preview_without_graphic_fails(capsys):
    status = main(["command", "-t", "a.qth", "--preview"])
    assert status == 1
    assert capsys.readouterr().out == ""


def test_log_default_name(capsys):
    status, words = _command(capsys, "-t", "a.qth", "--log", "--site-dir", "s")
    assert status == 0
    assert words[words.index("-log") + 1] == os.path.join("s", "log_file.txt")


def test_transmitter_is_required():
    with pytest.raises(SystemExit) as info:
        main(["command"])
    assert info.value.code == 2


def test_action_is_required():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_files_lists_sites(tmp_path, capsys):
    for name in ("b.qth", "a.qth", "notes.txt"):
        (tmp_path / name).write_text("x")
    status = main(["files", "sites", "--site-dir", str(tmp_path)])
    assert status == 0
    assert capsys.readouterr().out.split() == ["a.qth", "b.qth"]


def test_files_lists_graphics_from_graphic_dir(tmp_path, capsys):
    graphics = tmp_path / "g"
    graphics.mkdir()
    (graphics / "map.gif").write_text("x")
    (graphics / "map.png").write_text("x")
    (tmp_path / "other.png").write_text("x")
    status = main(["files", "graphics", "--site-dir", str(tmp_path),
                   "--graphic-dir", str(graphics)])
    assert status == 0
    assert capsys.readouterr().out.split() == ["map.png", "map.gif"]


def test_files_missing_directory_lists_nothing(tmp_path, capsys):
    status = main(["files", "texts", "--site-dir", str(tmp_path / "missing")])
    assert status == 0
    assert capsys.readouterr().out == ""