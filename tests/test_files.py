import pytest

from quadkit.files import FileError, load_file, load_string, set_pc_assets_folder


@pytest.fixture(autouse=True)
def reset_assets_folder():
    set_pc_assets_folder(None)
    yield
    set_pc_assets_folder(None)


def test_load_file_round_trip(tmp_path):
    data = bytes(range(256))
    target = tmp_path / "blob.bin"
    target.write_bytes(data)
    assert load_file(str(target)) == data


def test_load_string(tmp_path):
    target = tmp_path / "hello.txt"
    target.write_text("héllo", encoding="utf-8")
    assert load_string(str(target)) == "héllo"


def test_load_string_is_lossy(tmp_path):
    target = tmp_path / "bad.txt"
    target.write_bytes(b"ok\xff")
    assert load_string(str(target)) == "ok\ufffd"


def test_assets_folder_prefix(tmp_path, monkeypatch):
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "tex.png").write_bytes(b"png")
    monkeypatch.chdir(tmp_path)
    set_pc_assets_folder("assets")
    assert load_file("tex.png") == b"png"


def test_missing_file_raises(tmp_path):
    missing = str(tmp_path / "nope.bin")
    with pytest.raises(FileError) as info:
        load_file(missing)
    assert info.value.path == missing
    assert str(info.value).startswith(f"Couldn't load file {missing}: ")
    assert isinstance(info.value.kind, FileNotFoundError)


def test_error_path_includes_assets_folder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    set_pc_assets_folder("assets")
    with pytest.raises(FileError) as info:
        load_string("missing.txt")
    assert info.value.path == "assets/missing.txt"