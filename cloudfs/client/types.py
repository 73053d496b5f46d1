# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, List, Mapping, Optional, Union

class AclRole(Enum):
    """Access level granted by an ACL entry."""
    READER = "READER"
    WRITER = "WRITER"
    OWNER = "OWNER"

@dataclass(frozen=True)
class AclEntity:
    """Principal an ACL entry applies to."""
    kind: str
    value: str

    @classmethod
    def user(cls, email: str) -> "AclEntity":
        return cls("user", email)

    @classmethod
    def group(cls, email: str) -> "AclEntity":
        return cls("group", email)

    @classmethod
    def domain(cls, domain: str) -> "AclEntity":
        return cls("domain", domain)

    @classmethod
    def all_users(cls) -> "AclEntity":
        return cls("allUsers", "")

    def __str__(self):
        if not self.value:
            return self.kind
        return f"{self.kind}-{self.value}"

@dataclass(frozen=True)
class Acl:
    """A (principal, role) pair granting access to an object."""
    entity: AclEntity
    role: AclRole

    @classmethod
    def of(cls, entity: AclEntity, role: AclRole) -> "Acl":
        return cls(entity, role)

    def __str__(self):
        return f"{self.entity}:{self.role.value}"

@dataclass(frozen=True)
class ObjectMetadata:
    """Metadata snapshot for a stored object."""
    bucket: str
    name: str
    size: int
    generation: Union[int, str]
    etag: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    content_type: Optional[str] = None
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None
    content_encoding: Optional[str] = None
    acl: Optional[FrozenSet[Acl]] = None
    user_metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

@dataclass
class HeadObjectOutput:
    """Metadata for an object as returned by a storage client."""
    content_type: Optional[str]
    content_encoding: Optional[str]
    content_length: int
    last_modified: datetime
    etag: str
    user_metadata: Dict[str, str]
    version_id: Optional[str]
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None
    acl: Optional[List[Acl]] = None
    created: Optional[datetime] = None

@dataclass
class ListObjectsOptions:
    """Options for listing objects."""
    prefix: Optional[str] = None
