import pytest

from splatkit.catalog import FileCatalog, list_files, list_graphic_files


def _touch(directory, *names):
    for name in names:
        (directory / name).write_text("x", encoding="utf-8")


def test_list_files_filters_and_sorts(tmp_path):
    _touch(tmp_path, "b.qth", "A.qth", "c.txt", "d.QTH")
    (tmp_path / "sub.qth").mkdir()
    assert list_files(tmp_path, "*.qth") == ["A.qth", "b.qth", "d.QTH"]


def test_list_files_several_patterns(tmp_path):
    _touch(tmp_path, "a.txt", "b.dat", "c.qth")
    assert list_files(tmp_path, ["*.txt", "*.dat"]) == ["a.txt", "b.dat"]


def test_list_files_missing_directory(tmp_path):
    assert list_files(tmp_path / "missing", "*.qth") == []


def test_graphic_files_grouped_by_kind(tmp_path):
    _touch(tmp_path, "z.png", "a.gif", "m.ps", "b.ppm", "a.png", "note.txt")
    assert list_graphic_files(tmp_path) == ["a.png", "z.png", "b.ppm", "m.ps", "a.gif"]


def test_catalog_lists_each_kind(tmp_path):
    sites = tmp_path / "sites"
    graphics = tmp_path / "graphics"
    sites.mkdir()
    graphics.mkdir()
    _touch(sites, "tx.qth", "rx.qth", "report.txt", "loss.dat", "map.png")
    _touch(graphics, "map.ppm")
    catalog = FileCatalog(sites, graphics)
    assert catalog.site_files() == ["rx.qth", "tx.qth"]
    assert catalog.text_files() == ["report.txt"]
    assert catalog.dat_files() == ["loss.dat"]
    assert catalog.graphic_files() == ["map.ppm"]


def test_graphic_dir_defaults_to_site_dir(tmp_path):
    _touch(tmp_path, "map.png")
    assert FileCatalog(tmp_path).graphic_files() == ["map.png"]


def test_refresh_appends_new_and_keeps_order(tmp_path):
    _touch(tmp_path, "m.qth", "z.qth")
    catalog = FileCatalog(tmp_path)
    _touch(tmp_path, "a.qth")
    catalog.refresh()
    assert catalog.site_files() == ["m.qth", "z.qth", "a.qth"]


def test_refresh_drops_removed_files(tmp_path):
    _touch(tmp_path, "a.qth", "b.qth", "c.qth", "r.txt")
    catalog = FileCatalog(tmp_path)
    (tmp_path / "a.qth").unlink()
    (tmp_path / "b.qth").unlink()
    (tmp_path / "r.txt").unlink()
    catalog.refresh()
    assert catalog.site_files() == ["c.qth"]
    assert catalog.text_files() == []


def test_returned_lists_are_copies(tmp_path):
    _touch(tmp_path, "a.qth")
    catalog = FileCatalog(tmp_path)
    catalog.site_files().append("fake.qth")
    assert catalog.site_files() == ["a.qth"]


@pytest.mark.parametrize("name", ["x.png", "x.ppm", "x.ps", "x.gif"])
def test_each_graphic_kind_is_recognised(tmp_path, name):
    _touch(tmp_path, name)
    assert list_graphic_files(tmp_path) == [name]