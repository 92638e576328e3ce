import pathlib

import pytest

from lsp_types.uri import from_fs_path, normalize, to_fs_path


def test_path_round_trip(tmp_path):
    file = tmp_path / "dir with space" / "a.c"
    uri = from_fs_path(file)
    assert uri.startswith("file:///")
    assert "%20" in uri
    assert to_fs_path(uri) == file.resolve()


def test_unc_path():
    assert to_fs_path("file://server/share/a.c") == pathlib.Path("//server/share/a.c")


def test_non_file_uri():
    with pytest.raises(ValueError):
        to_fs_path("https://example.com/a.c")


def test_normalize_quoting():
    assert normalize("file:///a%20b/c.c") == normalize("file:///a b/c.c")
