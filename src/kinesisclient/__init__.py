"""
Kinesis Client - Python configuration layer for a stream consumer library.

This module provides the main entry points:

- **KinesisClientLibConfiguration**: The worker configuration, built from the
  application and stream names and tuned through chained `with_*` overrides.
- **InitialPositionInStream / InitialPositionInStreamExtended**: Where reading
  starts for a shard without checkpoint.
- **InvalidArgumentError**: Raised for any rejected configuration value.

Example:
    >>> from kinesisclient import KinesisClientLibConfiguration
    >>> config = KinesisClientLibConfiguration("my-app", "my-stream").with_max_records(500)
"""

# --- Configuration ---
from .config import KinesisClientLibConfiguration as KinesisClientLibConfiguration

# --- Models ---
from .models import (
    InitialPositionInStreamExtended as InitialPositionInStreamExtended,
)

# --- Enums ---
from .enum import InitialPositionInStream as InitialPositionInStream

# --- Errors ---
from .errors import InvalidArgumentError as InvalidArgumentError

from .logging_config import (
    get_logger as get_logger,
    setup_sdk_logging as setup_sdk_logging,
)

__all__ = [
    # Configuration
    "KinesisClientLibConfiguration",
    # Logging
    "get_logger",
    "setup_sdk_logging",
    # Models
    "InitialPositionInStreamExtended",
    # Enums
    "InitialPositionInStream",
    # Errors
    "InvalidArgumentError",
]


# --- Set up the top-level logger for the SDK ---

from logging import NullHandler

get_logger().addHandler(NullHandler())
