from .initial_position_in_stream import (
    InitialPositionInStream as InitialPositionInStream,
)
