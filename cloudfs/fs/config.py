# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Configuration for cloudfs filesystems.

Values can be given directly or read from ``CLOUDFS_*`` environment variables:

    CLOUDFS_WORKING_DIRECTORY          (default "/")
    CLOUDFS_PERMIT_EMPTY_PATH_COMPONENTS (default false)
    CLOUDFS_STRIP_PREFIX_SLASH         (default true)
    CLOUDFS_USE_PSEUDO_DIRECTORIES     (default true)
    CLOUDFS_BLOCK_SIZE                 (default 2097152)
"""
import os
from dataclasses import dataclass

from cloudfs.client.exceptions import ConfigurationError

DEFAULT_BLOCK_SIZE = 2 * 1024 * 1024
ENV_PREFIX = "CLOUDFS_"

_TRUE = ('true', '1', 'yes')
_FALSE = ('false', '0', 'no')

def _env_bool(name, default):
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw == '':
        return default
    value = raw.lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{ENV_PREFIX + name} must be a boolean, got {raw!r}")

@dataclass(frozen=True)
class CloudStorageConfig:
    """
    Settings shared by every path of a filesystem.

    Attributes:
        working_directory (str): Absolute directory relative paths resolve against
        permit_empty_path_components (bool): Keep ``a//b`` instead of collapsing it
        strip_prefix_slash (bool): Drop the leading delimiter from object names
        use_pseudo_directories (bool): Treat trailing-delimiter paths as directories
            without consulting the store
        block_size (int): Preferred I/O block size in bytes
        delimiter (str): Path separator
    """
    working_directory: str = "/"
    permit_empty_path_components: bool = False
    strip_prefix_slash: bool = True
    use_pseudo_directories: bool = True
    block_size: int = DEFAULT_BLOCK_SIZE
    delimiter: str = "/"

    def __post_init__(self):
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigurationError("delimiter must be a single character")
        if not isinstance(self.working_directory, str):
            raise ConfigurationError(f"working_directory must be a string, got {type(self.working_directory).__name__}")
        if not self.working_directory.startswith(self.delimiter):
            raise ConfigurationError(f"working_directory must be absolute: {self.working_directory!r}")
        if not isinstance(self.block_size, int) or isinstance(self.block_size, bool):
            raise ConfigurationError(f"block_size must be an integer, got {type(self.block_size).__name__}")
        if self.block_size <= 0:
            raise ConfigurationError(f"block_size must be positive, got {self.block_size}")

    @classmethod
    def from_env(cls) -> "CloudStorageConfig":
        """Build a configuration from ``CLOUDFS_*`` environment variables."""
        raw_block_size = os.environ.get(ENV_PREFIX + "BLOCK_SIZE") or str(DEFAULT_BLOCK_SIZE)
        try:
            block_size = int(raw_block_size)
        except ValueError:
            raise ConfigurationError(f"{ENV_PREFIX}BLOCK_SIZE must be an integer, got {raw_block_size!r}")
        return cls(
            working_directory=os.environ.get(ENV_PREFIX + "WORKING_DIRECTORY") or "/",
            permit_empty_path_components=_env_bool("PERMIT_EMPTY_PATH_COMPONENTS", False),
            strip_prefix_slash=_env_bool("STRIP_PREFIX_SLASH", True),
            use_pseudo_directories=_env_bool("USE_PSEUDO_DIRECTORIES", True),
            block_size=block_size,
        )
