# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from .exceptions import (
    StorageError,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
    AuthenticationError,
    ConfigurationError,
)
from .types import Acl, AclEntity, AclRole, ObjectMetadata, HeadObjectOutput, ListObjectsOptions
from .store import ObjectStore, InMemoryObjectStore, ClientObjectStore
