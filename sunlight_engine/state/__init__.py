# sunlight_engine/state - Simulation state ownership and persistence
from .controller import SimulationController, SimulationState, SunFrame
from .persistence import (
    PersistedState,
    PersistenceError,
    decode_state,
    encode_state,
    dumps_state,
)

__all__ = [
    'SimulationController',
    'SimulationState',
    'SunFrame',
    'PersistedState',
    'PersistenceError',
    'decode_state',
    'encode_state',
    'dumps_state',
]
