# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Filesystem facade over an object store.

CloudStorageFileSystem binds an ObjectStore to a configuration and exposes
path-level operations. Attribute reads go through ``derive_attributes`` with
the store's ``lookup`` as the metadata capability.
"""
import logging
import time
from typing import List, Optional

from cloudfs.client.exceptions import InvalidArgumentError, NotFoundError
from .attributes import FileAttributes, derive_attributes
from .config import CloudStorageConfig
from .options import ObjectOption
from .path import StoragePath

logger = logging.getLogger(__name__)

class CloudStorageFileSystem:
    """
    Path-level operations on an object store.

    Attributes:
        store (ObjectStore): Backing store
        config (CloudStorageConfig): Path configuration
    """

    def __init__(self, store, config: Optional[CloudStorageConfig] = None):
        if store is None:
            raise InvalidArgumentError("store must not be None")
        self.store = store
        self.config = config or CloudStorageConfig()

    def _check_path(self, path):
        if not isinstance(path, StoragePath):
            raise InvalidArgumentError(f"path must be a StoragePath, got {type(path).__name__}")
        return path

    def path(self, bucket: str, key: str = "") -> StoragePath:
        return StoragePath.of(bucket, key, self.config)

    def path_from_uri(self, uri: str) -> StoragePath:
        return StoragePath.from_uri(uri, self.config)

    def write(self, path: StoragePath, data: bytes, *options: ObjectOption):
        """
        Write ``data`` to a file path, replacing any existing object.

        Args:
            path (StoragePath): Target file path
            data (bytes): Content
            *options (ObjectOption): Attribute options, see cloudfs.fs.options

        Returns:
            ObjectMetadata: Metadata of the written object

        Raises:
            InvalidArgumentError: If path is a directory or the store is read-only
        """
        self._check_path(path)
        if path.looks_like_directory:
            raise InvalidArgumentError(f"Cannot write to directory path {path}")
        if not hasattr(self.store, 'write'):
            raise InvalidArgumentError(f"{type(self.store).__name__} does not support writes")
        start_time = time.time()
        metadata = self.store.write(path.bucket, path.name, data, options)
        logger.debug(f"write {path} completed in {time.time() - start_time:.4f} seconds")
        return metadata

    def read_bytes(self, path: StoragePath) -> bytes:
        self._check_path(path)
        if path.looks_like_directory:
            raise InvalidArgumentError(f"Cannot read directory path {path}")
        return self.store.read(path.bucket, path.name)

    def read_attributes(self, path: StoragePath) -> FileAttributes:
        """Return a fresh attribute snapshot for ``path``."""
        self._check_path(path)
        return derive_attributes(path, self.store.lookup)

    def exists(self, path: StoragePath) -> bool:
        """
        Check whether a path exists.

        Directories exist when they are the root or have at least one object
        under them; files exist when an object backs them.
        """
        self._check_path(path)
        if path.is_root:
            return True
        if path.looks_like_directory:
            return bool(self.store.list_names(path.bucket, path.name))
        try:
            derive_attributes(path, self.store.lookup)
        except NotFoundError:
            return False
        return True

    def list_dir(self, path: StoragePath) -> List[str]:
        """
        List the immediate children of a directory.

        Sub-directories implied by deeper names are returned once, with a
        trailing delimiter. A directory marker object for ``path`` itself is
        not listed.
        """
        self._check_path(path)
        directory = path.directory()
        prefix = directory.name
        delim = self.config.delimiter
        children = []
        seen = set()
        for name in self.store.list_names(directory.bucket, prefix):
            rest = name[len(prefix):]
            if not rest:
                continue
            head, sep, _ = rest.partition(delim)
            child = head + sep
            if child not in seen:
                seen.add(child)
                children.append(child)
        return children
