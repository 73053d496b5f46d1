# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from .config import CloudStorageConfig
from .path import StoragePath
from .options import (
    ObjectOption,
    with_acl,
    with_cache_control,
    with_content_disposition,
    with_content_encoding,
    with_mime_type,
    with_user_metadata,
)
from .attributes import FileAttributes, FileKey, derive_attributes, file_key_of
from .filesystem import CloudStorageFileSystem
