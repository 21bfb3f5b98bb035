"""
Initial Position Definitions.

This module defines `InitialPositionInStreamExtended`, the pairing of an
[`InitialPositionInStream`][kinesisclient.enum.InitialPositionInStream] mode
with the timestamp required by the `AT_TIMESTAMP` mode.
"""

from datetime import datetime
from typing import Any, Dict, Optional

import pydantic
from pydantic import ConfigDict, model_validator
from typing_extensions import Self

from ..enum import InitialPositionInStream
from ..errors import InvalidArgumentError


class InitialPositionInStreamExtended(pydantic.BaseModel):
    """
    The starting point for reading a shard, with its optional timestamp.

    Instances are immutable. The model guarantees that `timestamp` is set
    if and only if `position` is `AT_TIMESTAMP`; use the
    [`new_initial_position()`][kinesisclient.models.InitialPositionInStreamExtended.new_initial_position]
    and
    [`new_initial_position_at_timestamp()`][kinesisclient.models.InitialPositionInStreamExtended.new_initial_position_at_timestamp]
    factories rather than the constructor.

    Attributes:
        position: The initial position mode.
        timestamp: The point in time to start from, only for `AT_TIMESTAMP`.
    """

    model_config = ConfigDict(frozen=True)

    position: InitialPositionInStream
    """The initial position mode."""

    timestamp: Optional[datetime] = None
    """The point in time to start reading from. `None` unless `position` is `AT_TIMESTAMP`."""

    @model_validator(mode="after")
    def validate_timestamp_matches_position(self) -> Self:
        """Ensures a timestamp is given exactly when the position requires one."""
        if self.position == InitialPositionInStream.AT_TIMESTAMP:
            if self.timestamp is None:
                raise ValueError("A timestamp is required for AT_TIMESTAMP position.")
        elif self.timestamp is not None:
            raise ValueError(
                f"A timestamp is only allowed for AT_TIMESTAMP position. Got {self.position}."
            )
        return self

    @classmethod
    def new_initial_position(cls, position: Any) -> "InitialPositionInStreamExtended":
        """
        Factory method for the `LATEST` and `TRIM_HORIZON` modes.

        Args:
            position: An `InitialPositionInStream` member or its string value.

        Raises:
            InvalidArgumentError: If `position` is not a known mode, or is
                `AT_TIMESTAMP` (which needs a timestamp).
        """
        try:
            position = InitialPositionInStream(position)
        except ValueError:
            raise InvalidArgumentError(
                "InitialPositionInStream", position, "unknown position"
            ) from None

        if position == InitialPositionInStream.AT_TIMESTAMP:
            raise InvalidArgumentError(
                "InitialPositionInStream",
                position,
                "use the timestamp variant for AT_TIMESTAMP",
            )
        return cls(position=position)

    @classmethod
    def new_initial_position_at_timestamp(
        cls, timestamp: datetime
    ) -> "InitialPositionInStreamExtended":
        """
        Factory method for the `AT_TIMESTAMP` mode.

        The timestamp is stored as given: it is not checked to be in the past
        or within the stream retention period.

        Raises:
            InvalidArgumentError: If `timestamp` is not a `datetime`.
        """
        if not isinstance(timestamp, datetime):
            raise InvalidArgumentError(
                "Timestamp", timestamp, "expected a datetime instance"
            )
        return cls(position=InitialPositionInStream.AT_TIMESTAMP, timestamp=timestamp)

    @property
    def shard_iterator_type(self) -> str:
        """The shard iterator type name for a `GetShardIterator` request."""
        return self.position.value

    def to_shard_iterator_kwargs(self) -> Dict[str, Any]:
        """
        Returns the position-related fields of a `GetShardIterator` request.

        Example:
            `{"ShardIteratorType": "AT_TIMESTAMP", "Timestamp": datetime(...)}`
        """
        kwargs: Dict[str, Any] = {"ShardIteratorType": self.shard_iterator_type}
        if self.timestamp is not None:
            kwargs["Timestamp"] = self.timestamp
        return kwargs
