import time

import pytest

from soloader import utils


def test_current_timestamp_ms_close_to_now():
    before = int(time.time() * 1000)
    stamp = utils.current_timestamp_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= stamp <= after + 1


def test_save_load_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    utils.file_save(target, b"\x00\x01payload")
    assert utils.file_load(target) == b"\x00\x01payload"
    assert utils.file_size(target) == len(b"\x00\x01payload")
    assert utils.file_exists(target)


def test_load_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        utils.file_load(tmp_path / "missing")


def test_load_empty_raises(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    with pytest.raises(ValueError):
        utils.file_load(target)


def test_size_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        utils.file_size(tmp_path / "missing")


def test_mkpath_creates_parents_only(tmp_path):
    target = tmp_path / "a" / "b" / "file.txt"
    utils.file_mkpath(str(target))
    assert utils.is_dir(tmp_path / "a" / "b")
    assert not utils.file_exists(target)
    utils.file_mkpath(str(target))
    assert utils.is_dir(tmp_path / "a")


def test_mkpath_empty_raises():
    with pytest.raises(ValueError):
        utils.file_mkpath("")


def test_copy_into_new_directories(tmp_path):
    source = tmp_path / "src.txt"
    source.write_bytes(b"contents")
    destination = tmp_path / "x" / "y" / "dst.txt"
    utils.file_copy(str(source), str(destination))
    assert destination.read_bytes() == b"contents"


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        utils.file_copy(str(tmp_path / "nope"), str(tmp_path / "out"))
    assert not utils.file_exists(tmp_path / "out")


def test_is_dir(tmp_path):
    file_path = tmp_path / "f"
    file_path.write_bytes(b"1")
    assert utils.is_dir(tmp_path)
    assert not utils.is_dir(file_path)


def test_sha1_known_vector():
    assert utils.str_sha1sum("abc") == "A9993E364706816ABA3E25717850C26C9CD0D89D"


def test_sha1_size_zero_stops_at_nul():
    assert utils.str_sha1sum(b"abc\0def", 0) == utils.str_sha1sum("abc")
    assert utils.str_sha1sum(b"abcdef", 3) == utils.str_sha1sum("abc")


def test_sha1_shape():
    digest = utils.str_sha1sum("anything at all")
    assert len(digest) == 40
    assert digest == digest.upper()
    int(digest, 16)


def test_file_sha1sum_matches_string(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"abc")
    assert utils.file_sha1sum(target) == utils.str_sha1sum(b"abc", 3)


def test_str_replace():
    assert utils.str_replace("hello world", "o", "0") == "hell0 w0rld"
    assert utils.str_replace("abc", "", "x") == "abc"
    assert utils.str_replace("", "a", "x") == ""
    assert utils.str_replace("abc", "z", "x") == "abc"


def test_str_remove():
    assert utils.str_remove("aXbXc", "X") == "abc"
    assert utils.str_remove("abc", "") == "abc"
    assert utils.str_remove("abc", "abc") == ""


def test_starts_and_ends_with():
    assert utils.str_starts_with("libfoo.so", "lib")
    assert utils.str_starts_with("anything", "")
    assert not utils.str_starts_with("li", "lib")
    assert not utils.str_starts_with("", "a")
    assert utils.str_ends_with("libfoo.so", ".so")
    assert not utils.str_ends_with("so", ".so")
    assert utils.str_ends_with("x", "")