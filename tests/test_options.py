import pytest

from cloudfs import (
    Acl,
    AclEntity,
    AclRole,
    InvalidArgumentError,
    with_acl,
    with_cache_control,
    with_content_disposition,
    with_content_encoding,
    with_mime_type,
    with_user_metadata,
)
from cloudfs.fs.options import ObjectOption, collect_options

def test_only_given_fields_are_set():
    assert collect_options([with_mime_type("text/plain")]) == {
        "content_type": "text/plain",
        "user_metadata": {},
    }

def test_all_options():
    acl = Acl.of(AclEntity.user("serf@example.com"), AclRole.READER)
    fields = collect_options([
        with_cache_control("potato"),
        with_mime_type("text/potato"),
        with_acl(acl),
        with_content_disposition("crash call"),
        with_content_encoding("gzip"),
        with_user_metadata("green", "bean"),
    ])
    assert fields == {
        "cache_control": "potato",
        "content_type": "text/potato",
        "acl": frozenset({acl}),
        "content_disposition": "crash call",
        "content_encoding": "gzip",
        "user_metadata": {"green": "bean"},
    }

def test_repeatable_options_accumulate():
    reader = Acl.of(AclEntity.user("serf@example.com"), AclRole.READER)
    owner = Acl.of(AclEntity.group("lords@example.com"), AclRole.OWNER)
    fields = collect_options([
        with_acl(reader),
        with_acl(owner),
        with_acl(reader),
        with_user_metadata("green", "bean"),
        with_user_metadata("red", "pepper"),
    ])
    assert fields["acl"] == frozenset({reader, owner})
    assert fields["user_metadata"] == {"green": "bean", "red": "pepper"}

def test_last_scalar_option_wins():
    fields = collect_options([with_mime_type("text/plain"), with_mime_type("text/html")])
    assert fields["content_type"] == "text/html"

@pytest.mark.parametrize("make", [
    lambda: with_cache_control(None),
    lambda: with_mime_type(None),
    lambda: with_mime_type(42),
    lambda: with_acl(None),
    lambda: with_acl("user-serf@example.com:READER"),
    lambda: with_content_disposition(None),
    lambda: with_content_encoding(None),
    lambda: with_user_metadata(None, "bean"),
    lambda: with_user_metadata("green", None),
    lambda: collect_options(None),
    lambda: collect_options(["not an option"]),
    lambda: collect_options([ObjectOption("storage_class", "COLDLINE")]),
])
def test_invalid_options(make):
    with pytest.raises(InvalidArgumentError):
        make()

def test_acl_str():
    acl = Acl.of(AclEntity.user("serf@example.com"), AclRole.READER)
    assert str(acl) == "user-serf@example.com:READER"
    assert str(Acl.of(AclEntity.all_users(), AclRole.READER)) == "allUsers:READER"
    assert str(AclEntity.domain("example.com")) == "domain-example.com"
