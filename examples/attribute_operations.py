# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from cloudfs import (
    Acl,
    AclEntity,
    AclRole,
    CloudStorageFileSystem,
    InMemoryObjectStore,
    NotFoundError,
    with_acl,
    with_cache_control,
    with_mime_type,
    with_user_metadata,
)

def main():
    fs = CloudStorageFileSystem(InMemoryObjectStore())

    # Write an object with a few attributes
    path = fs.path_from_uri("gs://my-test-bucket/reports/hello.txt")
    fs.write(
        path,
        b"Hello, World!",
        with_mime_type("text/plain"),
        with_cache_control("public, max-age=3600"),
        with_acl(Acl.of(AclEntity.user("serf@example.com"), AclRole.READER)),
        with_user_metadata("green", "bean"),
    )
    print(f"Wrote {path}")

    # Read the attributes back
    attrs = fs.read_attributes(path)
    print(f"Size: {attrs.size} bytes")
    print(f"MIME type: {attrs.mime_type}")
    print(f"Cache-Control: {attrs.cache_control}")
    print(f"Content-Encoding: {attrs.content_encoding}")  # None, never set
    print(f"ACL: {sorted(str(a) for a in attrs.acl)}")
    print(f"green = {attrs.get_user_metadata('green')}")
    print(f"File key: {attrs.file_key}")

    # Directories need no backing object
    directory = fs.read_attributes(path.parent())
    print(f"{path.parent()} is a directory: {directory.is_directory()}")
    print(f"Children: {fs.list_dir(path.parent())}")

    # Rewriting produces a new generation and a new file key
    fs.write(path, b"Hello again!", with_mime_type("text/plain"))
    print(f"New file key: {fs.read_attributes(path).file_key}")

    try:
        fs.read_attributes(fs.path("my-test-bucket", "reports/missing.txt"))
    except NotFoundError as e:
        print(f"Missing object: {e}")

if __name__ == "__main__":
    main()
