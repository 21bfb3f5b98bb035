from enum import StrEnum


class InitialPositionInStream(StrEnum):
    """
    Where a worker starts reading a shard when no checkpoint exists for it.

    The string values match the shard iterator types understood by the
    stream service, so a member can be sent as-is in a `GetShardIterator`
    request.
    """

    LATEST = "LATEST"
    """Start after the most recent record (only new data is read)."""

    TRIM_HORIZON = "TRIM_HORIZON"
    """Start at the oldest record still retained by the stream."""

    AT_TIMESTAMP = "AT_TIMESTAMP"
    """Start at the first record written at or after a given timestamp."""
