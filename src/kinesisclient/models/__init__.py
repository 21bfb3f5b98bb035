from .initial_position import (
    InitialPositionInStreamExtended as InitialPositionInStreamExtended,
)
