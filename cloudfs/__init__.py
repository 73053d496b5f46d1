# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
cloudfs: a filesystem view of object storage.

The FUSE adapter lives in ``cloudfs.fuse`` and is not imported here, since
loading it requires libfuse.
"""
from .client import (
    Acl,
    AclEntity,
    AclRole,
    ClientObjectStore,
    InMemoryObjectStore,
    InvalidArgumentError,
    NotFoundError,
    ObjectMetadata,
    ObjectStore,
    StorageError,
    StoreUnavailableError,
)
from .fs import (
    CloudStorageConfig,
    CloudStorageFileSystem,
    FileAttributes,
    FileKey,
    StoragePath,
    derive_attributes,
    file_key_of,
    with_acl,
    with_cache_control,
    with_content_disposition,
    with_content_encoding,
    with_mime_type,
    with_user_metadata,
)

__version__ = "0.1.0"
