from pathlib import Path

import pytest

from tfdemo.files import gather_dir


def test_directory_is_searched_recursively(tmp_path):
    (tmp_path / "a.dem").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("x")
    nested = tmp_path / "sub" / "deeper"
    nested.mkdir(parents=True)
    (nested / "b.dem").write_bytes(b"")
    (nested / "c.zip").write_bytes(b"")

    found = gather_dir(tmp_path)
    assert set(found) == {tmp_path / "a.dem", nested / "b.dem"}


def test_hidden_dem_name_has_no_extension(tmp_path):
    (tmp_path / ".dem").write_bytes(b"")
    assert gather_dir(tmp_path) == []


def test_file_lists_paths(tmp_path):
    listing = tmp_path / "list.txt"
    listing.write_text("one.dem\r\ndir/two.dem\n")
    assert gather_dir(listing) == [Path("one.dem"), Path("dir/two.dem")]


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        gather_dir(tmp_path / "missing")