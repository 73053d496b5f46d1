# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
class StorageError(Exception):
    """Base exception for cloudfs errors."""
    def __init__(self, message: str, code: str = "ERR_UNKNOWN"):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

class InvalidArgumentError(StorageError):
    """A path, option or capability argument was missing or malformed."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_INVALID_ARGUMENT")

class NotFoundError(StorageError):
    """No object backs a non-directory path."""
    def __init__(self, message: str, bucket: str = None, name: str = None):
        self.bucket = bucket
        self.name = name
        super().__init__(message, code="ERR_NOT_FOUND")

class StoreUnavailableError(StorageError):
    """The metadata store could not be reached."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_UNAVAILABLE")

class AuthenticationError(StorageError):
    """Authentication failed."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_AUTH")

class ConfigurationError(StorageError):
    """Configuration or credential error."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_CONFIG")
