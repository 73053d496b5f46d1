# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Retry Module.

This module provides a retry decorator with exponential backoff for calls made
against a gRPC storage client. Transient errors are retried with increasing
delays between attempts; everything else is converted to a cloudfs exception
and raised immediately.

Functions:
    retry: Decorator for retrying functions with exponential backoff.
    convert_grpc_error: Convert a gRPC error to a cloudfs exception.
"""
import logging
import time
from functools import wraps
from typing import Type, Callable, Any, Tuple
import grpc
from .exceptions import (
    StorageError,
    AuthenticationError,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {
    grpc.StatusCode.UNAVAILABLE,
    grpc.StatusCode.RESOURCE_EXHAUSTED,
    grpc.StatusCode.DEADLINE_EXCEEDED,
}

def _status_code(e: grpc.RpcError) -> grpc.StatusCode:
    if hasattr(e, 'code') and callable(e.code):
        return e.code()
    return grpc.StatusCode.UNKNOWN

def convert_grpc_error(e: grpc.RpcError, operation: str = None) -> StorageError:
    """
    Convert gRPC errors to cloudfs errors.

    Args:
        e (grpc.RpcError): The gRPC error to convert.
        operation (str, optional): The operation being performed. Defaults to None.

    Returns:
        StorageError: The converted error.
    """
    error_msg = str(e.details() if hasattr(e, 'details') and callable(e.details) else e)
    if operation:
        error_msg = f"{operation}: {error_msg}"
    status_code = _status_code(e)

    if status_code == grpc.StatusCode.NOT_FOUND:
        return NotFoundError(error_msg)
    if status_code in RETRYABLE_STATUS_CODES:
        return StoreUnavailableError(error_msg)
    if status_code == grpc.StatusCode.INVALID_ARGUMENT:
        return InvalidArgumentError(error_msg)
    if status_code in (grpc.StatusCode.UNAUTHENTICATED, grpc.StatusCode.PERMISSION_DENIED):
        return AuthenticationError(error_msg)
    if status_code == grpc.StatusCode.INTERNAL:
        return StorageError(error_msg, code="ERR_INTERNAL")
    return StorageError(error_msg)

def retry(
    max_attempts: int = 5,
    initial_backoff: float = 0.1,
    max_backoff: float = 5.0,
    backoff_multiplier: float = 2.0,
    retryable_exceptions: Tuple[Type[Exception], ...] = (grpc.RpcError,)
) -> Callable:
    """
    Decorator for retrying a function with exponential backoff.

    Args:
        max_attempts (int): Maximum number of attempts. Defaults to 5.
        initial_backoff (float): Initial backoff time in seconds. Defaults to 0.1.
        max_backoff (float): Maximum backoff time in seconds. Defaults to 5.0.
        backoff_multiplier (float): Multiplier for exponential backoff. Defaults to 2.0.
        retryable_exceptions (Tuple[Type[Exception], ...]): Exceptions that trigger a retry.
            Defaults to (grpc.RpcError,).

    Returns:
        Callable: A decorator that wraps the function.
    """
    if max_attempts < 1:
        raise InvalidArgumentError("max_attempts must be at least 1")

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            """
            Executes the function with retry logic and exponential backoff.

            Raises:
                StoreUnavailableError: If all attempts fail with a transient error.
                StorageError: For non-retryable gRPC errors.
            """
            last_exception = None
            backoff = initial_backoff
            operation = func.__name__.lstrip('_').upper()

            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except retryable_exceptions as e:
                    last_exception = e

                    if isinstance(e, grpc.RpcError):
                        status_code = _status_code(e)
                        if status_code not in RETRYABLE_STATUS_CODES:
                            logger.debug(f"Non-retryable gRPC error ({status_code}) during {func.__name__}")
                            raise convert_grpc_error(e, operation) from e
                        logger.warning(f"Retryable gRPC error ({status_code}) during {func.__name__}. "
                                       f"Attempt {attempt + 1}/{max_attempts}.")
                    else:
                        logger.warning(f"Retryable exception {type(e).__name__} during {func.__name__}. "
                                       f"Attempt {attempt + 1}/{max_attempts}.")

                    if attempt < max_attempts - 1:
                        time.sleep(backoff)
                        backoff = min(backoff * backoff_multiplier, max_backoff)

            logger.error(f"{func.__name__} failed after {max_attempts} attempts: {last_exception}")
            raise StoreUnavailableError(
                f"{operation} failed after {max_attempts} attempts: {last_exception}"
            ) from last_exception

        return wrapper
    return decorator
