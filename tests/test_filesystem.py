import pytest

from cloudfs import (
    ClientObjectStore,
    CloudStorageFileSystem,
    InvalidArgumentError,
    NotFoundError,
    with_mime_type,
)

HAPPY = "(✿◕ ‿◕ )ノ".encode("utf-8")

def test_write_and_read(fs, path):
    metadata = fs.write(path, HAPPY, with_mime_type("text/plain"))
    assert metadata.name == "randompath"
    assert fs.read_bytes(path) == HAPPY

def test_write_to_directory_rejected(fs, dir_path):
    with pytest.raises(InvalidArgumentError):
        fs.write(dir_path, HAPPY)
    with pytest.raises(InvalidArgumentError):
        fs.read_bytes(dir_path)

def test_read_missing(fs, path):
    with pytest.raises(NotFoundError):
        fs.read_bytes(path)

def test_exists(fs, path, dir_path):
    assert not fs.exists(path)
    assert not fs.exists(dir_path)
    assert fs.exists(fs.path("bucket"))
    fs.write(fs.path("bucket", "randompath/child"), HAPPY)
    assert fs.exists(dir_path)
    assert not fs.exists(path)
    fs.write(path, HAPPY)
    assert fs.exists(path)

def test_list_dir(fs):
    for key in ("a/one", "a/two", "a/sub/three", "a/sub/four", "b"):
        fs.write(fs.path("bucket", key), HAPPY)
    assert fs.list_dir(fs.path("bucket", "a")) == ["one", "sub/", "two"]
    assert fs.list_dir(fs.path("bucket", "a/sub/")) == ["four", "three"]
    assert fs.list_dir(fs.path("bucket")) == ["a/", "b"]
    assert fs.list_dir(fs.path("bucket", "missing/")) == []

def test_path_uses_config(fs):
    path = fs.path("bucket", "x")
    assert path.config is fs.config

def test_read_only_store():
    fs = CloudStorageFileSystem(ClientObjectStore(object()))
    with pytest.raises(InvalidArgumentError):
        fs.write(fs.path("bucket", "a"), HAPPY)

def test_requires_store():
    with pytest.raises(InvalidArgumentError):
        CloudStorageFileSystem(None)
