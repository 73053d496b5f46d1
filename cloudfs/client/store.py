# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Object stores backing the cloudfs attribute model.

An object store answers metadata lookups by (bucket, name), reads object
content, and lists names under a prefix. Two implementations are provided:

    InMemoryObjectStore: a local stand-in for the storage service, used by
        tests and examples. Every write gets a new generation number.
    ClientObjectStore: adapts a gRPC storage client (``head_object``,
        ``get_object``, ``list_objects``) and owns the retry policy.
"""
import hashlib
import logging
from datetime import datetime, timezone
from threading import Lock
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple

from cloudfs.fs.options import ObjectOption, collect_options
from .exceptions import InvalidArgumentError, NotFoundError
from .retry import retry
from .types import ListObjectsOptions, ObjectMetadata

logger = logging.getLogger(__name__)

def _check_name(bucket, name):
    if not bucket or not isinstance(bucket, str):
        raise InvalidArgumentError("bucket must be a non-empty string")
    if name is None or not isinstance(name, str):
        raise InvalidArgumentError("object name must be a string")

class ObjectStore:
    """
    Base class for object stores.

    ``lookup`` must be safe to call from several threads at once.
    """

    def lookup(self, bucket: str, name: str) -> Optional[ObjectMetadata]:
        """
        Fetch the metadata of an object.

        Returns:
            ObjectMetadata: The current snapshot, or None if no object exists.
        """
        raise NotImplementedError

    def read(self, bucket: str, name: str) -> bytes:
        """Return the full content of an object, raising NotFoundError if absent."""
        raise NotImplementedError

    def list_names(self, bucket: str, prefix: str = "") -> List[str]:
        """Return the sorted names of all objects starting with ``prefix``."""
        raise NotImplementedError

class InMemoryObjectStore(ObjectStore):
    """
    Object store held in process memory.

    Attributes:
        objects (dict): Maps (bucket, name) to (metadata, content).
    """

    def __init__(self):
        self.objects: Dict[Tuple[str, str], Tuple[ObjectMetadata, bytes]] = {}
        self._generation = 0
        self._lock = Lock()

    def write(self, bucket: str, name: str, data: bytes, options: Iterable[ObjectOption] = ()) -> ObjectMetadata:
        """
        Store ``data`` under (bucket, name), replacing any previous object.

        Args:
            bucket (str): Bucket name
            name (str): Object name
            data (bytes): Object content
            options (Iterable[ObjectOption]): Attribute options for the new object

        Returns:
            ObjectMetadata: Metadata of the object just written
        """
        _check_name(bucket, name)
        if data is None:
            raise InvalidArgumentError("data must not be None")
        fields = collect_options(options)
        fields["user_metadata"] = MappingProxyType(dict(fields["user_metadata"]))
        data = bytes(data)
        now = datetime.now(timezone.utc)
        with self._lock:
            self._generation += 1
            previous = self.objects.get((bucket, name))
            metadata = ObjectMetadata(
                bucket=bucket,
                name=name,
                size=len(data),
                generation=self._generation,
                etag=hashlib.md5(data).hexdigest(),
                created=previous[0].created if previous else now,
                updated=now,
                **fields,
            )
            self.objects[(bucket, name)] = (metadata, data)
        logger.debug(f"Wrote gs://{bucket}/{name} generation={metadata.generation} size={metadata.size}")
        return metadata

    def delete(self, bucket: str, name: str) -> None:
        _check_name(bucket, name)
        with self._lock:
            if self.objects.pop((bucket, name), None) is None:
                raise NotFoundError(f"Object gs://{bucket}/{name} does not exist", bucket, name)

    def lookup(self, bucket: str, name: str) -> Optional[ObjectMetadata]:
        _check_name(bucket, name)
        with self._lock:
            entry = self.objects.get((bucket, name))
        return entry[0] if entry else None

    def read(self, bucket: str, name: str) -> bytes:
        _check_name(bucket, name)
        with self._lock:
            entry = self.objects.get((bucket, name))
        if entry is None:
            raise NotFoundError(f"Object gs://{bucket}/{name} does not exist", bucket, name)
        return entry[1]

    def list_names(self, bucket: str, prefix: str = "") -> List[str]:
        _check_name(bucket, prefix)
        with self._lock:
            return sorted(n for (b, n) in self.objects if b == bucket and n.startswith(prefix))

class ClientObjectStore(ObjectStore):
    """
    Object store backed by a gRPC storage client.

    The client is expected to expose ``head_object(bucket, key)`` returning a
    HeadObjectOutput, ``get_object(bucket, key)`` returning bytes and
    ``list_objects(bucket, ListObjectsOptions)`` yielding keys. Transient gRPC
    failures are retried; NOT_FOUND on ``head_object`` becomes None.

    Attributes:
        client: The wrapped storage client
    """

    def __init__(self, client, max_attempts: int = 5, initial_backoff: float = 0.1, max_backoff: float = 5.0):
        if client is None:
            raise InvalidArgumentError("client must not be None")
        self.client = client
        policy = retry(max_attempts=max_attempts, initial_backoff=initial_backoff, max_backoff=max_backoff)
        self._head_object = policy(self._head_object)
        self._get_object = policy(self._get_object)
        self._list_objects = policy(self._list_objects)

    def _head_object(self, bucket, name):
        return self.client.head_object(bucket, name)

    def _get_object(self, bucket, name):
        return self.client.get_object(bucket, name)

    def _list_objects(self, bucket, prefix):
        return list(self.client.list_objects(bucket, ListObjectsOptions(prefix=prefix)))

    def lookup(self, bucket: str, name: str) -> Optional[ObjectMetadata]:
        _check_name(bucket, name)
        try:
            output = self._head_object(bucket, name)
        except NotFoundError:
            return None
        return ObjectMetadata(
            bucket=bucket,
            name=name,
            size=output.content_length,
            generation=output.version_id or output.etag,
            etag=output.etag,
            created=output.created or output.last_modified,
            updated=output.last_modified,
            content_type=output.content_type,
            cache_control=output.cache_control,
            content_disposition=output.content_disposition,
            content_encoding=output.content_encoding,
            acl=frozenset(output.acl) if output.acl is not None else None,
            user_metadata=MappingProxyType(dict(output.user_metadata or {})),
        )

    def read(self, bucket: str, name: str) -> bytes:
        _check_name(bucket, name)
        return self._get_object(bucket, name)

    def list_names(self, bucket: str, prefix: str = "") -> List[str]:
        _check_name(bucket, prefix)
        return sorted(self._list_objects(bucket, prefix))
