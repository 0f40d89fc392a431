"""Decision strategies for Wahoo players."""

from .base import DecisionStrategy, CompositeStrategy
from .heuristics import (
    ObviousMove,
    SmartLeaveYolo,
    EnterEndzone,
    Capture,
    EnterYolo,
    ScootEndzone,
    LeaveBench,
    FirstLegal,
    RandomMove,
    STRATEGY_REGISTRY,
    DEFAULT_PRIORITY,
    build_strategy,
    random_priority,
)

__all__ = [
    'DecisionStrategy',
    'CompositeStrategy',
    'ObviousMove',
    'SmartLeaveYolo',
    'EnterEndzone',
    'Capture',
    'EnterYolo',
    'ScootEndzone',
    'LeaveBench',
    'FirstLegal',
    'RandomMove',
    'STRATEGY_REGISTRY',
    'DEFAULT_PRIORITY',
    'build_strategy',
    'random_priority',
]
