"""
Client Library Configuration Module.

This module defines `KinesisClientLibConfiguration`, the set of tunables read by
the worker, the lease manager and the metrics publisher of a stream consumer:
failover timing, batch sizing, lease and shard-sync cadence, checkpoint
validation and worker concurrency.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..enum import InitialPositionInStream
from ..helpers import (
    _check_is_bool,
    _check_is_value_not_empty,
    _check_is_value_positive,
    new_worker_id,
)
from ..logging_config import get_logger
from ..models import InitialPositionInStreamExtended
from .defaults import (
    DEFAULT_CLEANUP_LEASES_UPON_SHARDS_COMPLETION,
    DEFAULT_DONT_CALL_PROCESS_RECORDS_FOR_EMPTY_RECORD_LIST,
    DEFAULT_FAILOVER_TIME_MILLIS,
    DEFAULT_IDLETIME_BETWEEN_READS_MILLIS,
    DEFAULT_INITIAL_LEASE_TABLE_READ_CAPACITY,
    DEFAULT_INITIAL_LEASE_TABLE_WRITE_CAPACITY,
    DEFAULT_INITIAL_POSITION_IN_STREAM,
    DEFAULT_MAX_LEASES_FOR_WORKER,
    DEFAULT_MAX_LEASES_TO_STEAL_AT_ONE_TIME,
    DEFAULT_MAX_RECORDS,
    DEFAULT_METRICS_BUFFER_TIME_MILLIS,
    DEFAULT_METRICS_MAX_QUEUE_SIZE,
    DEFAULT_PARENT_SHARD_POLL_INTERVAL_MILLIS,
    DEFAULT_SHARD_SYNC_INTERVAL_MILLIS,
    DEFAULT_SHUTDOWN_GRACE_MILLIS,
    DEFAULT_SKIP_SHARD_SYNC_AT_STARTUP_IF_LEASES_EXIST,
    DEFAULT_TASK_BACKOFF_TIME_MILLIS,
    DEFAULT_VALIDATE_SEQUENCE_NUMBER_BEFORE_CHECKPOINTING,
    DEFAULT_WORKER_THREAD_POOL_SIZE,
)

# Set the hierarchical logger
logger = get_logger(__name__)

# Required identifiers: validated once, with no override method
_READ_ONLY_FIELDS = frozenset({"application_name", "stream_name"})


@dataclass
class KinesisClientLibConfiguration:
    """
    Configuration of a stream consumer worker.

    Only the application name, the stream name and (optionally) the worker id
    are passed to the constructor; every other field starts at its default
    (see [`defaults`][kinesisclient.config.defaults]) and is changed through
    the `with_*` methods. Each of them validates its argument, updates the
    field in place and returns the same instance, so calls can be chained.

    Example:
        ```python
        from kinesisclient import KinesisClientLibConfiguration, InitialPositionInStream

        config = (
            KinesisClientLibConfiguration("my-app", "my-stream")
            .with_initial_position_in_stream(InitialPositionInStream.LATEST)
            .with_max_records(500)
            .with_failover_time_millis(20_000)
        )
        ```

    Note: Thread Safety
        The configuration is not synchronized. Build it from a single thread,
        then stop calling `with_*` methods before handing it to the worker:
        from that point it must be treated as read-only.

    Note: Direct Assignment
        `application_name` and `stream_name` cannot be reassigned. Other
        fields can be assigned directly, but only the `with_*` methods
        validate the value. `dataclasses.replace()` builds a new configuration
        through the constructor, so every field not passed to it (overrides
        included) goes back to its default.

    Raises:
        InvalidArgumentError: If `application_name` or `stream_name` is empty.
    """

    # --- Identity ---
    application_name: str
    """Name of the consumer application. Also the default lease table name."""

    stream_name: str
    """Name of the stream to consume."""

    worker_id: str = ""
    """Identity of this worker. A random UUID is generated when left empty."""

    table_name: str = field(init=False, default="")
    """Name of the lease table. Defaults to `application_name`."""

    kinesis_endpoint: str = field(init=False, default="")
    """Stream service endpoint override. Empty means the regional default."""

    region_name: str = field(init=False, default="")
    """Region of the stream."""

    # --- Stream position ---
    initial_position_in_stream: InitialPositionInStream = field(
        init=False, default=DEFAULT_INITIAL_POSITION_IN_STREAM
    )
    """Where to start reading a shard that has no checkpoint."""

    initial_position_in_stream_extended: InitialPositionInStreamExtended = field(
        init=False,
        default_factory=lambda: InitialPositionInStreamExtended.new_initial_position(
            DEFAULT_INITIAL_POSITION_IN_STREAM
        ),
    )
    """`initial_position_in_stream` with its timestamp, kept in sync by the overrides."""

    # --- Timing ---
    failover_time_millis: int = field(init=False, default=DEFAULT_FAILOVER_TIME_MILLIS)
    """Lease duration: a lease not renewed within this window can be taken over."""

    idle_time_between_reads_in_millis: int = field(
        init=False, default=DEFAULT_IDLETIME_BETWEEN_READS_MILLIS
    )
    """Sleep time after a fetch that returned no records."""

    parent_shard_poll_interval_millis: int = field(
        init=False, default=DEFAULT_PARENT_SHARD_POLL_INTERVAL_MILLIS
    )
    """Wait between checks for the completion of parent shards."""

    shard_sync_interval_millis: int = field(
        init=False, default=DEFAULT_SHARD_SYNC_INTERVAL_MILLIS
    )
    """Interval between two shard discovery runs."""

    task_backoff_time_millis: int = field(
        init=False, default=DEFAULT_TASK_BACKOFF_TIME_MILLIS
    )
    """Backoff before retrying a failed task."""

    shutdown_grace_millis: int = field(init=False, default=DEFAULT_SHUTDOWN_GRACE_MILLIS)
    """Time given to record processors to finish on shutdown."""

    metrics_buffer_time_millis: int = field(
        init=False, default=DEFAULT_METRICS_BUFFER_TIME_MILLIS
    )
    """Metrics are buffered for at most this long before being published."""

    # --- Sizing / limits ---
    max_records: int = field(init=False, default=DEFAULT_MAX_RECORDS)
    """Max number of records per fetch."""

    metrics_max_queue_size: int = field(init=False, default=DEFAULT_METRICS_MAX_QUEUE_SIZE)
    """Max number of metrics buffered before being published."""

    max_leases_for_worker: int = field(init=False, default=DEFAULT_MAX_LEASES_FOR_WORKER)
    """Max number of leases (shards) this worker may hold."""

    max_leases_to_steal_at_one_time: int = field(
        init=False, default=DEFAULT_MAX_LEASES_TO_STEAL_AT_ONE_TIME
    )
    """Max number of leases taken from other workers in a single cycle."""

    initial_lease_table_read_capacity: int = field(
        init=False, default=DEFAULT_INITIAL_LEASE_TABLE_READ_CAPACITY
    )
    initial_lease_table_write_capacity: int = field(
        init=False, default=DEFAULT_INITIAL_LEASE_TABLE_WRITE_CAPACITY
    )

    worker_thread_pool_size: int = field(init=False, default=DEFAULT_WORKER_THREAD_POOL_SIZE)
    """Number of threads processing shards."""

    # --- Behavior flags ---
    call_process_records_even_for_empty_record_list: bool = field(
        init=False, default=DEFAULT_DONT_CALL_PROCESS_RECORDS_FOR_EMPTY_RECORD_LIST
    )
    """Invoke the record processor also when a fetch returned no records."""

    cleanup_terminated_shards_before_expiry: bool = field(
        init=False, default=DEFAULT_CLEANUP_LEASES_UPON_SHARDS_COMPLETION
    )
    """Delete the leases of fully processed (closed) shards."""

    validate_sequence_number_before_checkpointing: bool = field(
        init=False, default=DEFAULT_VALIDATE_SEQUENCE_NUMBER_BEFORE_CHECKPOINTING
    )
    """Check a sequence number against the stream before checkpointing it."""

    skip_shard_sync_at_worker_initialization_if_leases_exist: bool = field(
        init=False, default=DEFAULT_SKIP_SHARD_SYNC_AT_STARTUP_IF_LEASES_EXIST
    )
    """Skip the startup shard sync when the lease table is already populated."""

    def __post_init__(self):
        _check_is_value_not_empty("ApplicationName", self.application_name)
        _check_is_value_not_empty("StreamName", self.stream_name)

        if self.worker_id is None or self.worker_id == "":
            self.worker_id = new_worker_id()
            logger.debug(f"Generated worker id '{self.worker_id}'")
        else:
            _check_is_value_not_empty("WorkerID", self.worker_id)

        self.table_name = self.application_name

    def __setattr__(self, name: str, value: Any):
        if name in _READ_ONLY_FIELDS and name in self.__dict__:
            raise AttributeError(f"'{name}' cannot be changed after construction")
        super().__setattr__(name, value)

    def _apply(self, name: str, value: Any) -> "KinesisClientLibConfiguration":
        # Log first: a failing handler must not leave the field half-applied
        logger.debug(f"Configuration '{self.application_name}': {name}={value!r}")
        setattr(self, name, value)
        return self

    # --- Identity ---

    def with_table_name(self, table_name: str) -> "KinesisClientLibConfiguration":
        """Uses an alternative lease table instead of `application_name`."""
        _check_is_value_not_empty("TableName", table_name)
        return self._apply("table_name", table_name)

    def with_kinesis_endpoint(
        self, kinesis_endpoint: str
    ) -> "KinesisClientLibConfiguration":
        """Points the client at a custom stream service endpoint (e.g. a local emulator)."""
        _check_is_value_not_empty("KinesisEndpoint", kinesis_endpoint)
        return self._apply("kinesis_endpoint", kinesis_endpoint)

    def with_region_name(self, region_name: str) -> "KinesisClientLibConfiguration":
        _check_is_value_not_empty("RegionName", region_name)
        return self._apply("region_name", region_name)

    # --- Stream position ---

    def with_initial_position_in_stream(
        self, initial_position_in_stream: Any
    ) -> "KinesisClientLibConfiguration":
        """
        Sets the initial position to `LATEST` or `TRIM_HORIZON`.

        Overrides any timestamp previously set through
        [`with_timestamp_at_initial_position_in_stream()`][kinesisclient.config.KinesisClientLibConfiguration.with_timestamp_at_initial_position_in_stream].

        Args:
            initial_position_in_stream: An `InitialPositionInStream` member or
                its string value.

        Raises:
            InvalidArgumentError: For an unknown position, or `AT_TIMESTAMP`.
        """
        extended = InitialPositionInStreamExtended.new_initial_position(
            initial_position_in_stream
        )
        self._apply("initial_position_in_stream_extended", extended)
        self.initial_position_in_stream = extended.position
        return self

    def with_timestamp_at_initial_position_in_stream(
        self, timestamp: datetime
    ) -> "KinesisClientLibConfiguration":
        """
        Starts reading at the first record written at or after `timestamp`.

        Sets the initial position to `AT_TIMESTAMP`. The timestamp must be a
        `datetime`; it is not checked against the current time or the stream
        retention period.

        Raises:
            InvalidArgumentError: If `timestamp` is not a `datetime`.
        """
        extended = InitialPositionInStreamExtended.new_initial_position_at_timestamp(
            timestamp
        )
        self._apply("initial_position_in_stream_extended", extended)
        self.initial_position_in_stream = extended.position
        return self

    # --- Timing ---

    def with_failover_time_millis(
        self, failover_time_millis: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("FailoverTimeMillis", failover_time_millis)
        return self._apply("failover_time_millis", failover_time_millis)

    def with_idle_time_between_reads_in_millis(
        self, idle_time_between_reads_in_millis: int
    ) -> "KinesisClientLibConfiguration":
        """
        Controls how long the worker sleeps when a fetch returns no records.

        This value is only used for empty fetches: when records are returned,
        the next fetch starts as soon as the record processor returns. A high
        value may leave the consumer unable to catch up; when raising it,
        consider enabling
        [`with_call_process_records_even_for_empty_record_list()`][kinesisclient.config.KinesisClientLibConfiguration.with_call_process_records_even_for_empty_record_list]
        to keep track of how far behind the consumer is.
        """
        _check_is_value_positive(
            "IdleTimeBetweenReadsInMillis", idle_time_between_reads_in_millis
        )
        return self._apply(
            "idle_time_between_reads_in_millis", idle_time_between_reads_in_millis
        )

    def with_parent_shard_poll_interval_millis(
        self, parent_shard_poll_interval_millis: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive(
            "ParentShardPollIntervalMillis", parent_shard_poll_interval_millis
        )
        return self._apply(
            "parent_shard_poll_interval_millis", parent_shard_poll_interval_millis
        )

    def with_shard_sync_interval_millis(
        self, shard_sync_interval_millis: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("ShardSyncIntervalMillis", shard_sync_interval_millis)
        return self._apply("shard_sync_interval_millis", shard_sync_interval_millis)

    def with_task_backoff_time_millis(
        self, task_backoff_time_millis: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("TaskBackoffTimeMillis", task_backoff_time_millis)
        return self._apply("task_backoff_time_millis", task_backoff_time_millis)

    def with_shutdown_grace_millis(
        self, shutdown_grace_millis: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("ShutdownGraceMillis", shutdown_grace_millis)
        return self._apply("shutdown_grace_millis", shutdown_grace_millis)

    def with_metrics_buffer_time_millis(
        self, metrics_buffer_time_millis: int
    ) -> "KinesisClientLibConfiguration":
        """Metrics are buffered for at most this long before being published."""
        _check_is_value_positive("MetricsBufferTimeMillis", metrics_buffer_time_millis)
        return self._apply("metrics_buffer_time_millis", metrics_buffer_time_millis)

    # --- Sizing / limits ---

    def with_max_records(self, max_records: int) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("MaxRecords", max_records)
        return self._apply("max_records", max_records)

    def with_metrics_max_queue_size(
        self, metrics_max_queue_size: int
    ) -> "KinesisClientLibConfiguration":
        """Max number of metrics to buffer before publishing."""
        _check_is_value_positive("MetricsMaxQueueSize", metrics_max_queue_size)
        return self._apply("metrics_max_queue_size", metrics_max_queue_size)

    def with_max_leases_for_worker(
        self, max_leases_for_worker: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("MaxLeasesForWorker", max_leases_for_worker)
        return self._apply("max_leases_for_worker", max_leases_for_worker)

    def with_max_leases_to_steal_at_one_time(
        self, max_leases_to_steal_at_one_time: int
    ) -> "KinesisClientLibConfiguration":
        _check_is_value_positive(
            "MaxLeasesToStealAtOneTime", max_leases_to_steal_at_one_time
        )
        return self._apply(
            "max_leases_to_steal_at_one_time", max_leases_to_steal_at_one_time
        )

    def with_initial_lease_table_read_capacity(
        self, initial_lease_table_read_capacity: int
    ) -> "KinesisClientLibConfiguration":
        """Read capacity units of the lease table, used only when the table is created."""
        _check_is_value_positive(
            "InitialLeaseTableReadCapacity", initial_lease_table_read_capacity
        )
        return self._apply(
            "initial_lease_table_read_capacity", initial_lease_table_read_capacity
        )

    def with_initial_lease_table_write_capacity(
        self, initial_lease_table_write_capacity: int
    ) -> "KinesisClientLibConfiguration":
        """Write capacity units of the lease table, used only when the table is created."""
        _check_is_value_positive(
            "InitialLeaseTableWriteCapacity", initial_lease_table_write_capacity
        )
        return self._apply(
            "initial_lease_table_write_capacity", initial_lease_table_write_capacity
        )

    def with_worker_thread_pool_size(self, n: int) -> "KinesisClientLibConfiguration":
        _check_is_value_positive("WorkerThreadPoolSize", n)
        return self._apply("worker_thread_pool_size", n)

    # --- Behavior flags ---

    def with_call_process_records_even_for_empty_record_list(
        self, call_process_records_even_for_empty_record_list: bool
    ) -> "KinesisClientLibConfiguration":
        _check_is_bool(
            "CallProcessRecordsEvenForEmptyRecordList",
            call_process_records_even_for_empty_record_list,
        )
        return self._apply(
            "call_process_records_even_for_empty_record_list",
            call_process_records_even_for_empty_record_list,
        )

    def with_cleanup_terminated_shards_before_expiry(
        self, cleanup_terminated_shards_before_expiry: bool
    ) -> "KinesisClientLibConfiguration":
        _check_is_bool(
            "CleanupTerminatedShardsBeforeExpiry",
            cleanup_terminated_shards_before_expiry,
        )
        return self._apply(
            "cleanup_terminated_shards_before_expiry",
            cleanup_terminated_shards_before_expiry,
        )

    def with_validate_sequence_number_before_checkpointing(
        self, validate_sequence_number_before_checkpointing: bool
    ) -> "KinesisClientLibConfiguration":
        _check_is_bool(
            "ValidateSequenceNumberBeforeCheckpointing",
            validate_sequence_number_before_checkpointing,
        )
        return self._apply(
            "validate_sequence_number_before_checkpointing",
            validate_sequence_number_before_checkpointing,
        )

    def with_skip_shard_sync_at_worker_initialization_if_leases_exist(
        self, skip_shard_sync_at_worker_initialization_if_leases_exist: bool
    ) -> "KinesisClientLibConfiguration":
        _check_is_bool(
            "SkipShardSyncAtWorkerInitializationIfLeasesExist",
            skip_shard_sync_at_worker_initialization_if_leases_exist,
        )
        return self._apply(
            "skip_shard_sync_at_worker_initialization_if_leases_exist",
            skip_shard_sync_at_worker_initialization_if_leases_exist,
        )
