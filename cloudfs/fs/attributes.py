# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
File attributes for cloudfs paths.

This module turns object metadata into a read-only FileAttributes snapshot.
Directory-ness is decided by the path alone: a name ending in the delimiter
is a directory and needs no backing object. Every other path must be backed
by an object, otherwise NotFoundError is raised.

Attribute fields the object was written without are None, never "".

Usage:
    attrs = derive_attributes(StoragePath.from_uri("gs://bucket/report.csv"), store.lookup)
    attrs.mime_type          # "text/csv" or None
    attrs.is_regular_file()  # True
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Callable, FrozenSet, Mapping, Optional, Union

from cloudfs.client.exceptions import InvalidArgumentError, NotFoundError
from cloudfs.client.types import Acl, ObjectMetadata
from .path import StoragePath

logger = logging.getLogger(__name__)

MetadataLookup = Callable[[str, str], Optional[ObjectMetadata]]

_EMPTY = MappingProxyType({})

@dataclass(frozen=True)
class FileKey:
    """
    Identity of a file: bucket, normalized name and object generation.

    Directories have no generation. Because directory names end in the
    delimiter and file names do not, the two never compare equal.
    """
    bucket: str
    name: str
    generation: Optional[Union[int, str]] = None

    def __str__(self):
        if self.generation is None:
            return f"{self.bucket}/{self.name}"
        return f"{self.bucket}/{self.name}#{self.generation}"

def file_key_of(path: StoragePath, generation: Optional[Union[int, str]] = None) -> FileKey:
    """
    Compute the identity key of a path.

    Args:
        path (StoragePath): The path
        generation (int or str, optional): Object generation; only valid for files

    Returns:
        FileKey: The identity key

    Raises:
        InvalidArgumentError: If path is None, or a generation is given for a directory
    """
    if not isinstance(path, StoragePath):
        raise InvalidArgumentError(f"path must be a StoragePath, got {type(path).__name__}")
    if generation is not None and path.looks_like_directory:
        raise InvalidArgumentError(f"Directory {path} has no generation")
    return FileKey(path.bucket, path.name, generation)

@dataclass(frozen=True)
class FileAttributes:
    """
    Snapshot of the attributes of a file or directory.

    Two snapshots are equal when they were derived from the same path and the
    same metadata. A snapshot never changes and holds no reference to the store.

    Attributes:
        path (StoragePath): Path the snapshot was derived for
        file_key (FileKey): Identity of the path
        directory (bool): Whether the path is a directory
        size (int): Object size in bytes, 0 for directories
        generation: Object generation, None for directories
        etag (str): Object etag
        creation_time (datetime): When the object was first written
        last_modified_time (datetime): When the object was last written
        mime_type (str): Content-Type
        cache_control (str): Cache-Control
        acl (frozenset): ACL entries
        content_disposition (str): Content-Disposition
        content_encoding (str): Content-Encoding
        user_metadata (Mapping[str, str]): Read-only user metadata
    """
    path: StoragePath
    file_key: FileKey
    directory: bool
    size: int = 0
    generation: Optional[Union[int, str]] = None
    etag: Optional[str] = None
    creation_time: Optional[datetime] = None
    last_modified_time: Optional[datetime] = None
    mime_type: Optional[str] = None
    cache_control: Optional[str] = None
    acl: Optional[FrozenSet[Acl]] = None
    content_disposition: Optional[str] = None
    content_encoding: Optional[str] = None
    user_metadata: Mapping[str, str] = field(default_factory=lambda: _EMPTY, hash=False)

    @classmethod
    def for_directory(cls, path: StoragePath) -> "FileAttributes":
        return cls(path=path, file_key=file_key_of(path), directory=True)

    @classmethod
    def for_object(cls, path: StoragePath, metadata: ObjectMetadata) -> "FileAttributes":
        if not isinstance(metadata, ObjectMetadata):
            raise InvalidArgumentError(f"metadata must be an ObjectMetadata, got {type(metadata).__name__}")
        return cls(
            path=path,
            file_key=file_key_of(path, metadata.generation),
            directory=False,
            size=metadata.size,
            generation=metadata.generation,
            etag=metadata.etag,
            creation_time=metadata.created,
            last_modified_time=metadata.updated,
            mime_type=metadata.content_type,
            cache_control=metadata.cache_control,
            acl=metadata.acl,
            content_disposition=metadata.content_disposition,
            content_encoding=metadata.content_encoding,
            user_metadata=MappingProxyType(dict(metadata.user_metadata or {})),
        )

    @property
    def last_access_time(self) -> Optional[datetime]:
        # Object storage keeps no access time.
        return self.last_modified_time

    def is_directory(self) -> bool:
        return self.directory

    def is_regular_file(self) -> bool:
        return not self.directory

    def is_other(self) -> bool:
        return False

    def is_symbolic_link(self) -> bool:
        return False

    def get_user_metadata(self, name: str) -> Optional[str]:
        """Return one user metadata value, or None if it was never set."""
        if name is None:
            raise InvalidArgumentError("user metadata name must not be None")
        return self.user_metadata.get(name)

def derive_attributes(path: StoragePath, lookup: MetadataLookup) -> FileAttributes:
    """
    Derive the attributes of a path.

    Directory paths are answered without calling ``lookup``. For any other
    path ``lookup(bucket, name)`` is called once; whatever it raises is
    propagated unchanged.

    Args:
        path (StoragePath): Path to describe
        lookup (callable): ``(bucket, name) -> ObjectMetadata | None``

    Returns:
        FileAttributes: A fresh snapshot

    Raises:
        InvalidArgumentError: If path or lookup is missing
        NotFoundError: If no object backs a non-directory path
    """
    if not isinstance(path, StoragePath):
        raise InvalidArgumentError(f"path must be a StoragePath, got {type(path).__name__}")
    if lookup is None or not callable(lookup):
        raise InvalidArgumentError("lookup must be a callable")

    if path.looks_like_directory and path.config.use_pseudo_directories:
        logger.debug(f"derive_attributes: {path} is a pseudo directory")
        return FileAttributes.for_directory(path)

    metadata = lookup(path.bucket, path.name)
    if metadata is None:
        raise NotFoundError(f"No object backs {path}", path.bucket, path.name)
    if path.looks_like_directory:
        # Directory marker object, only reached without pseudo directories.
        return FileAttributes(
            path=path,
            file_key=file_key_of(path),
            directory=True,
            creation_time=metadata.created,
            last_modified_time=metadata.updated,
        )
    return FileAttributes.for_object(path, metadata)
