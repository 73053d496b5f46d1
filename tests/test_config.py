import pytest

from cloudfs import CloudStorageConfig
from cloudfs.client.exceptions import ConfigurationError
from cloudfs.fs.config import DEFAULT_BLOCK_SIZE

def test_defaults():
    config = CloudStorageConfig()
    assert config.working_directory == "/"
    assert not config.permit_empty_path_components
    assert config.strip_prefix_slash
    assert config.use_pseudo_directories
    assert config.block_size == DEFAULT_BLOCK_SIZE
    assert config.delimiter == "/"

def test_from_env(monkeypatch):
    monkeypatch.setenv("CLOUDFS_WORKING_DIRECTORY", "/work/")
    monkeypatch.setenv("CLOUDFS_PERMIT_EMPTY_PATH_COMPONENTS", "yes")
    monkeypatch.setenv("CLOUDFS_USE_PSEUDO_DIRECTORIES", "false")
    monkeypatch.setenv("CLOUDFS_BLOCK_SIZE", "4096")
    config = CloudStorageConfig.from_env()
    assert config.working_directory == "/work/"
    assert config.permit_empty_path_components
    assert config.strip_prefix_slash
    assert not config.use_pseudo_directories
    assert config.block_size == 4096

def test_from_env_defaults(monkeypatch):
    for name in ("WORKING_DIRECTORY", "PERMIT_EMPTY_PATH_COMPONENTS", "STRIP_PREFIX_SLASH",
                 "USE_PSEUDO_DIRECTORIES", "BLOCK_SIZE"):
        monkeypatch.delenv("CLOUDFS_" + name, raising=False)
    assert CloudStorageConfig.from_env() == CloudStorageConfig()

@pytest.mark.parametrize("name, value", [
    ("CLOUDFS_USE_PSEUDO_DIRECTORIES", "maybe"),
    ("CLOUDFS_BLOCK_SIZE", "big"),
    ("CLOUDFS_BLOCK_SIZE", "0"),
    ("CLOUDFS_WORKING_DIRECTORY", "relative/"),
])
def test_from_env_rejects(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError) as exc_info:
        CloudStorageConfig.from_env()
    assert exc_info.value.code == "ERR_CONFIG"

def test_rejects_bad_delimiter():
    with pytest.raises(ConfigurationError):
        CloudStorageConfig(delimiter="::")

@pytest.mark.parametrize("kwargs", [
    {"working_directory": None},
    {"working_directory": 7},
    {"delimiter": None},
    {"delimiter": 5},
    {"block_size": None},
    {"block_size": "4096"},
])
def test_rejects_wrong_types(kwargs):
    with pytest.raises(ConfigurationError):
        CloudStorageConfig(**kwargs)
