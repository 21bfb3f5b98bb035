from datetime import datetime, timezone

import pydantic
import pytest

from kinesisclient import (
    InitialPositionInStream,
    InitialPositionInStreamExtended,
    InvalidArgumentError,
)


def test_enum_values_match_shard_iterator_types():
    assert InitialPositionInStream.LATEST == "LATEST"
    assert InitialPositionInStream.TRIM_HORIZON == "TRIM_HORIZON"
    assert InitialPositionInStream.AT_TIMESTAMP == "AT_TIMESTAMP"
    assert len(InitialPositionInStream) == 3


@pytest.mark.parametrize(
    "position", [InitialPositionInStream.LATEST, InitialPositionInStream.TRIM_HORIZON]
)
def test_new_initial_position(position):
    ext = InitialPositionInStreamExtended.new_initial_position(position)
    assert ext.position is position
    assert ext.timestamp is None
    assert ext.to_shard_iterator_kwargs() == {"ShardIteratorType": position.value}


def test_new_initial_position_at_timestamp():
    ts = datetime(2024, 5, 17, 8, 0, tzinfo=timezone.utc)
    ext = InitialPositionInStreamExtended.new_initial_position_at_timestamp(ts)
    assert ext.position is InitialPositionInStream.AT_TIMESTAMP
    assert ext.timestamp == ts
    assert ext.shard_iterator_type == "AT_TIMESTAMP"
    assert ext.to_shard_iterator_kwargs() == {
        "ShardIteratorType": "AT_TIMESTAMP",
        "Timestamp": ts,
    }


def test_naive_timestamp_is_stored_unchanged():
    ts = datetime(2024, 5, 17, 8, 0)
    ext = InitialPositionInStreamExtended.new_initial_position_at_timestamp(ts)
    assert ext.timestamp == ts
    assert ext.timestamp.tzinfo is None


def test_new_initial_position_rejects_at_timestamp():
    with pytest.raises(InvalidArgumentError) as exc_info:
        InitialPositionInStreamExtended.new_initial_position(
            InitialPositionInStream.AT_TIMESTAMP
        )
    assert exc_info.value.field == "InitialPositionInStream"


def test_new_initial_position_at_timestamp_rejects_none():
    with pytest.raises(InvalidArgumentError) as exc_info:
        InitialPositionInStreamExtended.new_initial_position_at_timestamp(None)  # type: ignore
    assert exc_info.value.field == "Timestamp"
    assert exc_info.value.value is None


def test_model_rejects_missing_timestamp():
    """Test that direct construction cannot break the position/timestamp pairing."""
    with pytest.raises(pydantic.ValidationError, match="A timestamp is required"):
        InitialPositionInStreamExtended(position=InitialPositionInStream.AT_TIMESTAMP)


def test_model_rejects_unexpected_timestamp():
    with pytest.raises(pydantic.ValidationError, match="only allowed for AT_TIMESTAMP"):
        InitialPositionInStreamExtended(
            position=InitialPositionInStream.LATEST,
            timestamp=datetime(2024, 1, 1),
        )


def test_model_is_immutable():
    ext = InitialPositionInStreamExtended.new_initial_position(
        InitialPositionInStream.LATEST
    )
    with pytest.raises(pydantic.ValidationError):
        ext.position = InitialPositionInStream.TRIM_HORIZON  # type: ignore
