# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Write options for cloudfs objects.

Each ``with_*`` helper returns an ObjectOption that can be passed to
``CloudStorageFileSystem.write``. Options that are never given stay absent on
the written object; nothing is defaulted.

    fs.write(path, data, with_mime_type("text/plain"), with_user_metadata("green", "bean"))
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable

from cloudfs.client.exceptions import InvalidArgumentError
from cloudfs.client.types import Acl

CACHE_CONTROL = "cache_control"
MIME_TYPE = "content_type"
ACL = "acl"
CONTENT_DISPOSITION = "content_disposition"
CONTENT_ENCODING = "content_encoding"
USER_METADATA = "user_metadata"

@dataclass(frozen=True)
class ObjectOption:
    """A single attribute setting applied when an object is written."""
    name: str
    value: Any

def _require_str(value, what):
    if value is None:
        raise InvalidArgumentError(f"{what} must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be a string, got {type(value).__name__}")
    return value

def with_cache_control(cache_control: str) -> ObjectOption:
    """Set the Cache-Control header, e.g. ``public, max-age=3600``."""
    return ObjectOption(CACHE_CONTROL, _require_str(cache_control, "cache_control"))

def with_mime_type(mime_type: str) -> ObjectOption:
    """Set the Content-Type of the object."""
    return ObjectOption(MIME_TYPE, _require_str(mime_type, "mime_type"))

def with_acl(acl: Acl) -> ObjectOption:
    """Grant an ACL entry. May be given more than once."""
    if acl is None:
        raise InvalidArgumentError("acl must not be None")
    if not isinstance(acl, Acl):
        raise InvalidArgumentError(f"acl must be an Acl, got {type(acl).__name__}")
    return ObjectOption(ACL, acl)

def with_content_disposition(content_disposition: str) -> ObjectOption:
    return ObjectOption(CONTENT_DISPOSITION, _require_str(content_disposition, "content_disposition"))

def with_content_encoding(content_encoding: str) -> ObjectOption:
    return ObjectOption(CONTENT_ENCODING, _require_str(content_encoding, "content_encoding"))

def with_user_metadata(key: str, value: str) -> ObjectOption:
    """Add one user metadata pair. May be given more than once."""
    return ObjectOption(USER_METADATA, (_require_str(key, "user metadata key"),
                                        _require_str(value, "user metadata value")))

def collect_options(options: Iterable[ObjectOption]) -> Dict[str, Any]:
    """
    Fold write options into ObjectMetadata keyword arguments.

    Scalar options given twice keep the last value. ACL entries accumulate
    into a frozenset; user metadata pairs accumulate into a dict.

    Args:
        options (Iterable[ObjectOption]): Options passed to a write

    Returns:
        dict: Only the fields that were actually set, plus ``user_metadata``
    """
    if options is None:
        raise InvalidArgumentError("options must not be None")
    fields: Dict[str, Any] = {}
    acl = set()
    user_metadata = {}
    for option in options:
        if not isinstance(option, ObjectOption):
            raise InvalidArgumentError(f"Unsupported write option: {option!r}")
        if option.name == ACL:
            acl.add(option.value)
        elif option.name == USER_METADATA:
            key, value = option.value
            user_metadata[key] = value
        elif option.name in (CACHE_CONTROL, MIME_TYPE, CONTENT_DISPOSITION, CONTENT_ENCODING):
            fields[option.name] = option.value
        else:
            raise InvalidArgumentError(f"Unknown write option: {option.name}")
    if acl:
        fields[ACL] = frozenset(acl)
    fields[USER_METADATA] = user_metadata
    return fields
