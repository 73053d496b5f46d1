import pytest
import os

from cloudfs import CloudStorageFileSystem, InMemoryObjectStore

def pytest_configure(config):
    """Configure test environment."""
    os.environ.setdefault("CLOUDFS_TRACE_OPS", "true")

@pytest.fixture
def store():
    """Empty in-memory object store."""
    return InMemoryObjectStore()

@pytest.fixture
def fs(store):
    return CloudStorageFileSystem(store)

@pytest.fixture
def path(fs):
    return fs.path_from_uri("gs://bucket/randompath")

@pytest.fixture
def dir_path(fs):
    return fs.path_from_uri("gs://bucket/randompath/")
