# sunlight_engine/edit - Model edit history
"""
EDIT: TRANSFORM SNAPSHOTS AND UNDO/REDO
=======================================

    transform.py   TransformSnapshot, RotationOrder (pose value types)
    history.py     TransformHistory (linear undo/redo with branch truncation)
"""

from .transform import TransformSnapshot, RotationOrder
from .history import TransformHistory, clamp_index

__all__ = ['TransformSnapshot', 'RotationOrder', 'TransformHistory', 'clamp_index']
