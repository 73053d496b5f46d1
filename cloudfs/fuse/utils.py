# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Logging helpers for the cloudfs FUSE adapter.

Environment:
    CLOUDFS_LOG_LEVEL: Level for the ``CloudFS`` logger (default INFO)
    CLOUDFS_TRACE_OPS: Log every FUSE operation with its arguments
"""

import logging
import time
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s'

logger = logging.getLogger('CloudFS')

def trace_enabled():
    return os.environ.get('CLOUDFS_TRACE_OPS', '').lower() in ('true', '1', 'yes')

def configure_logging(level=None):
    """
    Configure root logging for a mount.

    Args:
        level (str, optional): Log level name. Defaults to CLOUDFS_LOG_LEVEL or INFO.

    Returns:
        int: The numeric level applied to the CloudFS logger
    """
    name = (level or os.environ.get('CLOUDFS_LOG_LEVEL') or 'INFO').upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logger.setLevel(numeric)
    return numeric

def time_function(func_name, start_time):
    """
    Log the elapsed time of an operation at debug level.

    Args:
        func_name (str): Name of the function being timed
        start_time (float): Start time from time.time()

    Returns:
        float: Elapsed time in seconds
    """
    elapsed = time.time() - start_time
    logger.debug(f"{func_name} completed in {elapsed:.4f} seconds")
    return elapsed

def trace_op(operation, path, **details):
    """
    Log a FUSE operation when CLOUDFS_TRACE_OPS is set.

    Args:
        operation (str): The file operation being performed
        path (str): The path of the file being operated on
        **details: Additional details to log
    """
    if trace_enabled():
        detail_str = ', '.join(f"{k}={v}" for k, v in details.items())
        logger.debug(f"TRACE: {operation} on {path} {detail_str}")
