# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Paths into a bucket.

A StoragePath is a bucket plus a normalized object name. Names ending in the
delimiter are directory-like; the empty name is the bucket root.
"""
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlsplit

from cloudfs.client.exceptions import InvalidArgumentError
from .config import CloudStorageConfig

SCHEME = "gs"
DEFAULT_CONFIG = CloudStorageConfig()

def normalize_name(key: str, config: CloudStorageConfig) -> str:
    """
    Normalize a key into an object name.

    Relative keys resolve against ``config.working_directory``. ``.`` segments
    are dropped and ``..`` removes the previous segment, stopping at the root.
    A trailing delimiter, ``.`` or ``..`` leaves the result directory-like.
    """
    delim = config.delimiter
    if not key.startswith(delim):
        key = config.working_directory.rstrip(delim) + delim + key
    segments = key.split(delim)[1:]
    directory = segments[-1] in ('', '.', '..')
    parts = []
    for i, segment in enumerate(segments):
        if segment == '.':
            continue
        if segment == '..':
            if parts:
                parts.pop()
            continue
        if segment == '' and (not config.permit_empty_path_components or i == len(segments) - 1):
            continue
        parts.append(segment)
    name = delim.join(parts)
    if directory and name:
        name += delim
    if not config.strip_prefix_slash:
        name = delim + name
    return name

@dataclass(frozen=True)
class StoragePath:
    """
    Immutable (bucket, name) path.

    Equality and hashing use the bucket and normalized name only; the
    configuration is carried along for later resolution.

    Attributes:
        bucket (str): Bucket name
        name (str): Normalized object name
        config (CloudStorageConfig): Filesystem configuration
    """
    bucket: str
    name: str
    config: CloudStorageConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    @classmethod
    def of(cls, bucket: str, key: str = "", config: Optional[CloudStorageConfig] = None) -> "StoragePath":
        """
        Build a normalized path.

        Raises:
            InvalidArgumentError: If bucket or key is missing or malformed
        """
        config = config or DEFAULT_CONFIG
        if bucket is None or not isinstance(bucket, str) or not bucket:
            raise InvalidArgumentError("bucket must be a non-empty string")
        if config.delimiter in bucket:
            raise InvalidArgumentError(f"bucket name must not contain {config.delimiter!r}: {bucket!r}")
        if key is None or not isinstance(key, str):
            raise InvalidArgumentError("key must be a string")
        return cls(bucket, normalize_name(key, config), config)

    @classmethod
    def from_uri(cls, uri: str, config: Optional[CloudStorageConfig] = None) -> "StoragePath":
        """Parse ``gs://bucket/key``."""
        if uri is None or not isinstance(uri, str):
            raise InvalidArgumentError("uri must be a string")
        parts = urlsplit(uri)
        if parts.scheme != SCHEME:
            raise InvalidArgumentError(f"Expected a {SCHEME}:// URI, got {uri!r}")
        if not parts.netloc:
            raise InvalidArgumentError(f"URI has no bucket: {uri!r}")
        if parts.query or parts.fragment:
            raise InvalidArgumentError(f"URI must not have a query or fragment: {uri!r}")
        return cls.of(parts.netloc, parts.path or "/", config)

    @property
    def delimiter(self) -> str:
        return self.config.delimiter

    @property
    def is_root(self) -> bool:
        return self.name in ("", self.delimiter)

    @property
    def looks_like_directory(self) -> bool:
        """True for the root and for names ending in the delimiter."""
        return self.name == "" or self.name.endswith(self.delimiter)

    @property
    def file_name(self) -> str:
        """Last name segment, without a trailing delimiter."""
        return self.name.rstrip(self.delimiter).rpartition(self.delimiter)[2]

    def directory(self) -> "StoragePath":
        """This path with a trailing delimiter."""
        if self.looks_like_directory:
            return self
        return StoragePath(self.bucket, self.name + self.delimiter, self.config)

    def parent(self) -> Optional["StoragePath"]:
        """The enclosing directory, or None for the root."""
        if self.is_root:
            return None
        head = self.name.rstrip(self.delimiter).rpartition(self.delimiter)[0]
        return StoragePath.of(self.bucket, self.delimiter + head + self.delimiter, self.config)

    def resolve(self, other: str) -> "StoragePath":
        """Resolve ``other`` against this path; absolute keys replace it."""
        if other is None or not isinstance(other, str):
            raise InvalidArgumentError("other must be a string")
        if other.startswith(self.delimiter):
            return StoragePath.of(self.bucket, other, self.config)
        base = self.directory().name
        if self.config.strip_prefix_slash:
            base = self.delimiter + base
        return StoragePath.of(self.bucket, base + other, self.config)

    def to_uri(self) -> str:
        return f"{SCHEME}://{self.bucket}/{self.name.lstrip(self.delimiter)}"

    def __str__(self):
        return self.to_uri()
