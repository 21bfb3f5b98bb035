import uuid

import pytest

from kinesisclient.errors import InvalidArgumentError
from kinesisclient.helpers import (
    _check_is_bool,
    _check_is_value_not_empty,
    _check_is_value_positive,
    new_worker_id,
)


def test_new_worker_id_is_a_uuid():
    worker_id = new_worker_id()
    assert str(uuid.UUID(worker_id)) == worker_id
    assert new_worker_id() != worker_id


def test_error_message_and_attributes():
    err = InvalidArgumentError("MaxRecords", 0, "must be positive")
    assert err.field == "MaxRecords"
    assert err.value == 0
    assert str(err) == "Invalid value for 'MaxRecords': 0 (must be positive)"


def test_error_message_without_reason():
    assert str(InvalidArgumentError("TableName", "")) == "Invalid value for 'TableName': ''"


def test_checks_accept_valid_values():
    _check_is_value_not_empty("TableName", "t")
    _check_is_value_positive("MaxRecords", 1)
    _check_is_bool("Flag", False)


def test_not_empty_check():
    with pytest.raises(InvalidArgumentError, match="must not be empty"):
        _check_is_value_not_empty("TableName", "")
    with pytest.raises(InvalidArgumentError, match="expected a string"):
        _check_is_value_not_empty("TableName", b"bytes")


def test_positive_check():
    with pytest.raises(InvalidArgumentError, match="must be positive"):
        _check_is_value_positive("MaxRecords", 0)
    with pytest.raises(InvalidArgumentError, match="expected an integer"):
        _check_is_value_positive("MaxRecords", False)


def test_bool_check():
    with pytest.raises(InvalidArgumentError, match="expected a boolean"):
        _check_is_bool("Flag", 1)
