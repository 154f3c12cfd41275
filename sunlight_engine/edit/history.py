# sunlight_engine/edit/history.py
"""
TRANSFORM HISTORY: LINEAR UNDO/REDO OVER MODEL POSES
====================================================

STATES:
-------
    Empty      length == 0, index == -1
    Populated  length >= 1, 0 <= index < length

INVARIANTS:
-----------
- -1 <= index < length
- index == -1  iff  length == 0
- history[index] is the pose currently applied to the model

HOW IT IS DRIVEN:
-----------------
The rendering host PUSHES poses in. The manager never reads a scene node:

    begin_editing(pose)   entering edit mode: one snapshot, index 0
    commit(pose)          a transform gesture ended
    undo() / redo()       return the pose the host must apply (or None)

Passive transform changes (camera moves, drags in progress) never reach this
class, so they never create entries.

BRANCHING:
----------
    [A, B, C, D]  index=3
    undo          index=2 (D is redoable)
    commit(E)  →  [A, B, C, E]  index=3  (D is gone)

Each operation builds the new stack first and publishes (stack, index) in a
single assignment, so a reader never sees a stack/index pair that do not
belong together.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .transform import TransformSnapshot

logger = logging.getLogger(__name__)


class TransformHistory:
    """Undo/redo stack of TransformSnapshots with a current index."""

    def __init__(self) -> None:
        self._state: Tuple[Tuple[TransformSnapshot, ...], int] = ((), -1)
        self.model_present = False

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def snapshots(self) -> Tuple[TransformSnapshot, ...]:
        return self._state[0]

    @property
    def index(self) -> int:
        return self._state[1]

    def __len__(self) -> int:
        return len(self._state[0])

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def current(self) -> Optional[TransformSnapshot]:
        snapshots, index = self._state
        return snapshots[index] if index >= 0 else None

    def can_undo(self) -> bool:
        return self.model_present and self.index > 0

    def can_redo(self) -> bool:
        return self.model_present and self.index < len(self) - 1

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Back to Empty (model replaced or cleared)."""
        self._state = ((), -1)

    def begin_editing(self, pose: Optional[TransformSnapshot] = None) -> bool:
        """
        Seed history when entering edit mode.

        With a pose the stack restarts as [pose] at index 0 and the model is
        marked present. Without one (no model loaded) the stack is emptied.

        Returns:
            True if the history was seeded.
        """
        if pose is None:
            self.model_present = False
            self.reset()
            return False
        self.model_present = True
        self._state = ((pose,), 0)
        return True

    def commit(self, pose: Optional[TransformSnapshot]) -> bool:
        """
        Record a finished edit, discarding any redoable entries.

        No-op (returns False) without a model or a pose.
        """
        if not self.model_present or pose is None:
            return False
        snapshots, index = self._state
        new_snapshots = snapshots[:index + 1] + (pose,)
        self._state = (new_snapshots, len(new_snapshots) - 1)
        return True

    def undo(self) -> Optional[TransformSnapshot]:
        """Step back. Returns the pose to apply, or None at the start."""
        if not self.can_undo():
            return None
        snapshots, index = self._state
        self._state = (snapshots, index - 1)
        return snapshots[index - 1]

    def redo(self) -> Optional[TransformSnapshot]:
        """Step forward. Returns the pose to apply, or None at the end."""
        if not self.can_redo():
            return None
        snapshots, index = self._state
        self._state = (snapshots, index + 1)
        return snapshots[index + 1]

    def rehydrate(self, snapshots: Iterable[TransformSnapshot], index: int) -> bool:
        """
        Replace the stack and index with externally restored data.

        A corrupt index is clamped into range instead of trusted: -1 for an
        empty stack, [0, len-1] otherwise.

        Returns:
            True if the payload was used as-is, False if it had to be clamped.
        """
        snapshots = tuple(snapshots)
        clamped = clamp_index(len(snapshots), index)
        self._state = (snapshots, clamped)
        if clamped != index:
            logger.warning(
                "Restored history index %r out of range for %d entries, clamped to %d",
                index, len(snapshots), clamped)
            return False
        return True

    def to_list(self) -> List[dict]:
        return [s.to_dict() for s in self.snapshots]


def clamp_index(length: int, index) -> int:
    """Nearest valid index for a stack of `length` entries."""
    if length == 0:
        return -1
    try:
        index = int(index)
    except (TypeError, ValueError):
        return length - 1
    return min(max(index, 0), length - 1)
