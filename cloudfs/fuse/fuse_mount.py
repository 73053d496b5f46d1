# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Read-only FUSE adapter for cloudfs.

This module exposes a bucket of a CloudStorageFileSystem as a local,
read-only filesystem. File attributes come from the cloudfs attribute model:
stat information from ``getattr`` and object metadata (MIME type,
cache-control, content-disposition, content-encoding, ACL, user metadata)
as ``user.*`` extended attributes.

Usage:
    from cloudfs import CloudStorageFileSystem, ClientObjectStore
    from cloudfs.fuse import mount

    mount(CloudStorageFileSystem(ClientObjectStore(client)), "my-bucket", "/mnt/my-bucket")

    getfattr -d /mnt/my-bucket/report.csv
"""

from fuse import FUSE, FuseOSError, Operations
import errno
import os
import stat
import time

from cloudfs.client.exceptions import NotFoundError, StorageError
from cloudfs.fs.attributes import FileAttributes

from .utils import configure_logging, logger, time_function, trace_op

DIRECTORY_SIZE = 4096
DIRECTORY_MIME_TYPE = 'inode/directory'
USER_METADATA_PREFIX = 'user.meta.'

_WRITE_FLAGS = os.O_WRONLY | os.O_RDWR | os.O_APPEND | os.O_CREAT | os.O_TRUNC

class AttributeFuse(Operations):
    """
    FUSE operations backed by a CloudStorageFileSystem bucket.

    All mutating operations are left to fusepy's Operations defaults, which
    fail with EROFS.

    Attributes:
        filesystem (CloudStorageFileSystem): Filesystem to expose
        bucket (str): Name of the bucket being mounted
    """

    def __init__(self, filesystem, bucket):
        """
        Args:
            filesystem (CloudStorageFileSystem): Filesystem to expose
            bucket (str): Name of the bucket to mount
        """
        logger.info(f"Initializing AttributeFuse with bucket: {bucket}")
        self.filesystem = filesystem
        self.bucket = bucket
        # Validates the bucket name up front.
        self.root = filesystem.path(bucket, '/')

    def _storage_path(self, path):
        """Convert a FUSE path to a StoragePath."""
        return self.filesystem.path(self.bucket, path)

    def _attributes(self, path):
        """
        Resolve a FUSE path to file attributes.

        FUSE paths never carry a trailing slash, so a path without a backing
        object is looked up again as a directory prefix.

        Raises:
            FuseOSError: ENOENT if neither an object nor a directory exists
        """
        storage_path = self._storage_path(path)
        if storage_path.is_root:
            return FileAttributes.for_directory(storage_path)
        try:
            return self.filesystem.read_attributes(storage_path)
        except NotFoundError:
            pass
        directory = storage_path.directory()
        if self.filesystem.exists(directory):
            return FileAttributes.for_directory(directory)
        logger.debug(f"Path {path} does not exist")
        raise FuseOSError(errno.ENOENT)

    def _stat(self, attrs):
        block_size = self.filesystem.config.block_size
        now = time.time()
        result = {
            'st_uid': os.getuid(),
            'st_gid': os.getgid(),
            'st_atime': now,
            'st_mtime': now,
            'st_ctime': now,
            'st_blksize': block_size,
            'st_rdev': 0,
        }
        if attrs.is_directory():
            result.update({
                'st_mode': stat.S_IFDIR | 0o555,
                'st_nlink': 2,
                'st_size': DIRECTORY_SIZE,
                'st_blocks': (DIRECTORY_SIZE + block_size - 1) // block_size,
            })
            return result
        result.update({
            'st_mode': stat.S_IFREG | 0o444,
            'st_nlink': 1,
            'st_size': attrs.size,
            'st_blocks': (attrs.size + block_size - 1) // block_size,
        })
        if attrs.last_modified_time is not None:
            mtime = attrs.last_modified_time.timestamp()
            result['st_mtime'] = mtime
            result['st_atime'] = attrs.last_access_time.timestamp()
            result['st_ctime'] = attrs.creation_time.timestamp() if attrs.creation_time else mtime
        return result

    def _xattrs(self, attrs):
        """Map file attributes to extended attributes, skipping absent ones."""
        if attrs.is_directory():
            return {'user.mime_type': DIRECTORY_MIME_TYPE.encode('utf-8')}
        values = {
            'user.mime_type': attrs.mime_type,
            'user.cache_control': attrs.cache_control,
            'user.content_disposition': attrs.content_disposition,
            'user.content_encoding': attrs.content_encoding,
            'user.etag': attrs.etag,
            'user.generation': str(attrs.generation) if attrs.generation is not None else None,
            'user.acl': ','.join(sorted(str(a) for a in attrs.acl)) if attrs.acl is not None else None,
        }
        for key, value in attrs.user_metadata.items():
            values[USER_METADATA_PREFIX + key] = value
        return {name: value.encode('utf-8') for name, value in values.items() if value is not None}

    def getattr(self, path, fh=None):
        """
        Get file attributes.

        Args:
            path (str): Path to the file or directory
            fh (int, optional): File handle

        Returns:
            dict: stat fields

        Raises:
            FuseOSError: ENOENT if the path does not exist, EIO on store errors
        """
        trace_op("getattr", path, fh=fh)
        start_time = time.time()
        try:
            result = self._stat(self._attributes(path))
            time_function("getattr", start_time)
            return result
        except FuseOSError:
            raise
        except StorageError as e:
            logger.error(f"getattr error for {path}: {str(e)}", exc_info=True)
            raise FuseOSError(errno.EIO)

    def getxattr(self, path, name, position=0):
        """
        Get one extended attribute.

        Args:
            path (str): Path to the file
            name (str): Name of the extended attribute
            position (int, optional): Position in the attribute. Defaults to 0.

        Returns:
            bytes: The attribute value

        Raises:
            FuseOSError: ENODATA if the attribute is not set, ENOENT if the path does not exist
        """
        trace_op("getxattr", path, name=name, position=position)
        try:
            xattrs = self._xattrs(self._attributes(path))
        except FuseOSError:
            raise
        except StorageError as e:
            logger.error(f"getxattr error for {path}: {str(e)}", exc_info=True)
            raise FuseOSError(errno.EIO)
        if name not in xattrs:
            logger.debug(f"getxattr: attribute '{name}' not set on {path}")
            raise FuseOSError(errno.ENODATA)
        return xattrs[name]

    def listxattr(self, path):
        """List the extended attributes set on a file or directory."""
        trace_op("listxattr", path)
        try:
            return sorted(self._xattrs(self._attributes(path)))
        except FuseOSError:
            raise
        except StorageError as e:
            logger.error(f"listxattr error for {path}: {str(e)}", exc_info=True)
            raise FuseOSError(errno.EIO)

    def readdir(self, path, fh):
        """
        List a directory.

        Returns:
            list: '.', '..' and the names of the immediate children
        """
        trace_op("readdir", path, fh=fh)
        start_time = time.time()
        try:
            directory = self._storage_path(path).directory()
            names = self.filesystem.list_dir(directory)
        except StorageError as e:
            logger.error(f"readdir error for {path}: {str(e)}", exc_info=True)
            raise FuseOSError(errno.EIO)
        entries = ['.', '..'] + list(dict.fromkeys(n.rstrip(directory.delimiter) for n in names))
        time_function("readdir", start_time)
        return entries

    def open(self, path, flags):
        """Open a file for reading; any write access fails with EROFS."""
        trace_op("open", path, flags=flags)
        if flags & _WRITE_FLAGS:
            raise FuseOSError(errno.EROFS)
        try:
            attrs = self._attributes(path)
        except StorageError as e:
            logger.error(f"open error for {path}: {str(e)}", exc_info=True)
            raise FuseOSError(errno.EIO)
        if attrs.is_directory():
            raise FuseOSError(errno.EISDIR)
        return 0

    def read(self, path, size, offset, fh):
        """
        Read file contents.

        Args:
            path (str): Path to the file
            size (int): Number of bytes to read
            offset (int): Offset in the file to start reading from
            fh (int): File handle

        Returns:
            bytes: The requested data, empty past the end of the file
        """
        trace_op("read", path, size=size, offset=offset, fh=fh)
        start_time = time.time()
        storage_path = self._storage_path(path)
        if storage_path.is_root:
            raise FuseOSError(errno.EISDIR)
        try:
            try:
                data = self.filesystem.read_bytes(storage_path)
            except NotFoundError:
                # FUSE paths carry no trailing slash; a prefix-implied directory lands here.
                if self.filesystem.exists(storage_path.directory()):
                    raise FuseOSError(errno.EISDIR)
                raise FuseOSError(errno.ENOENT)
        except FuseOSError:
            raise
        except StorageError as e:
            logger.error(f"Error reading {path}: {str(e)}", exc_info=True)
            raise FuseOSError(errno.EIO)
        time_function("read", start_time)
        return data[offset:offset + size]

def mount(filesystem, bucket, mountpoint, foreground=True, allow_other=False, log_level=None):
    """
    Mount a bucket read-only.

    Args:
        filesystem (CloudStorageFileSystem): Filesystem holding the bucket
        bucket (str): Name of the bucket to mount
        mountpoint (str): Directory to mount on
        foreground (bool, optional): Run in foreground. Defaults to True.
        allow_other (bool, optional): Allow other users to access the mount.
            Requires 'user_allow_other' in /etc/fuse.conf. Defaults to False.
        log_level (str, optional): Log level name. Defaults to CLOUDFS_LOG_LEVEL or INFO.
    """
    configure_logging(log_level)
    logger.info(f"Mounting bucket {bucket} at {mountpoint}")
    start_time = time.time()
    options = {'foreground': foreground, 'ro': True}
    if allow_other:
        options['allow_other'] = True
    try:
        FUSE(AttributeFuse(filesystem, bucket), mountpoint, nothreads=False, **options)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, unmounting...")
    finally:
        time_function("mount", start_time)
