import os

import pytest

from soloader.assets import Asset, AssetManager, AssetMode

CONTENT = b"hello asset data"


@pytest.fixture
def manager(tmp_path):
    assets_dir = tmp_path / "assets"
    assets_dir.mkdir()
    (assets_dir / "file.bin").write_bytes(CONTENT)
    (assets_dir / "sub").mkdir()
    (assets_dir / "sub" / "nested.txt").write_bytes(b"abc")
    return AssetManager(tmp_path)


def test_open_reports_length(manager):
    with manager.open("file.bin", AssetMode.STREAMING) as asset:
        assert asset.length() == len(CONTENT)
        assert asset.remaining_length() == len(CONTENT)


def test_read_whole_file(manager):
    with manager.open("file.bin", AssetMode.BUFFER) as asset:
        assert asset.read(1024) == CONTENT
        assert asset.remaining_length() == 0


def test_read_in_chunks_and_eof(manager):
    with manager.open("file.bin") as asset:
        first = asset.read(5)
        assert first == CONTENT[:5]
        assert asset.remaining_length() == len(CONTENT) - 5
        rest = asset.read(100)
        assert first + rest == CONTENT
        assert asset.read(10) == b""


def test_seek_returns_new_position(manager):
    with manager.open("file.bin", AssetMode.RANDOM) as asset:
        assert asset.seek(6) == 6
        assert asset.read(5) == CONTENT[6:11]
        assert asset.seek(-3, os.SEEK_END) == len(CONTENT) - 3
        assert asset.read(10) == CONTENT[-3:]


def test_nested_asset(manager):
    with manager.open("sub/nested.txt") as asset:
        assert asset.read(10) == b"abc"


def test_missing_asset_raises(manager):
    with pytest.raises(FileNotFoundError):
        manager.open("nope.bin", AssetMode.UNKNOWN)


def test_close_marks_closed(manager):
    asset = manager.open("file.bin")
    assert isinstance(asset, Asset)
    asset.close()
    assert asset.closed is True
    asset.close()
    with pytest.raises(ValueError):
        asset.read(1)


def test_negative_seek_raises(manager):
    with manager.open("file.bin") as asset:
        with pytest.raises(OSError):
            asset.seek(-100, os.SEEK_SET)