"""
Default values applied by
[`KinesisClientLibConfiguration`][kinesisclient.config.KinesisClientLibConfiguration]
at construction time. Durations are in milliseconds.
"""

from typing import Final

from ..enum import InitialPositionInStream

DEFAULT_INITIAL_POSITION_IN_STREAM: Final = InitialPositionInStream.TRIM_HORIZON

# A worker whose lease has not been renewed within this window is considered
# dead, and its shards can be taken over by another worker.
DEFAULT_FAILOVER_TIME_MILLIS: Final = 10_000

# Max records fetched in a single GetRecords call
DEFAULT_MAX_RECORDS: Final = 10_000

# Sleep between GetRecords calls that returned nothing
DEFAULT_IDLETIME_BETWEEN_READS_MILLIS: Final = 1_000

DEFAULT_DONT_CALL_PROCESS_RECORDS_FOR_EMPTY_RECORD_LIST: Final = False

# How often to check whether parent shards have been fully processed
DEFAULT_PARENT_SHARD_POLL_INTERVAL_MILLIS: Final = 10_000

DEFAULT_SHARD_SYNC_INTERVAL_MILLIS: Final = 60_000

DEFAULT_CLEANUP_LEASES_UPON_SHARDS_COMPLETION: Final = True

DEFAULT_TASK_BACKOFF_TIME_MILLIS: Final = 500

# Metrics are published at most every METRICS_BUFFER_TIME, or sooner when the
# queue reaches METRICS_MAX_QUEUE_SIZE
DEFAULT_METRICS_BUFFER_TIME_MILLIS: Final = 10_000
DEFAULT_METRICS_MAX_QUEUE_SIZE: Final = 10_000

DEFAULT_VALIDATE_SEQUENCE_NUMBER_BEFORE_CHECKPOINTING: Final = True

DEFAULT_SHUTDOWN_GRACE_MILLIS: Final = 5_000

# int16 max: effectively "no limit"
DEFAULT_MAX_LEASES_FOR_WORKER: Final = 32_767
DEFAULT_MAX_LEASES_TO_STEAL_AT_ONE_TIME: Final = 1

# Provisioned throughput of the lease table, only used when the table is created
DEFAULT_INITIAL_LEASE_TABLE_READ_CAPACITY: Final = 10
DEFAULT_INITIAL_LEASE_TABLE_WRITE_CAPACITY: Final = 10

DEFAULT_SKIP_SHARD_SYNC_AT_STARTUP_IF_LEASES_EXIST: Final = False

DEFAULT_WORKER_THREAD_POOL_SIZE: Final = 1
