"""Bounded stack of session snapshots for undo."""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional

from courtrotation.constants import UNDO_STACK_LIMIT
from courtrotation.models.session.state import Snapshot
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


class UndoStack:
    """Snapshots pushed before each mutation, newest last.

    There is no redo stack. Regenerating after an undo reproduces the undone
    round because the tie-break draw depends only on the day seed and the
    round index.
    """

    def __init__(
        self, snapshots: Iterable[Snapshot] = (), limit: int = UNDO_STACK_LIMIT
    ):
        """Initialize the stack.

        Args:
            snapshots: Initial snapshots, oldest first
            limit: Maximum number of snapshots kept; older ones are dropped
        """
        if limit < 1:
            raise ValueError(f"Undo stack limit must be positive: {limit}")
        self.limit = limit
        self._snapshots: Deque[Snapshot] = deque(snapshots, maxlen=limit)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def push(self, snapshot: Snapshot) -> None:
        """Push a snapshot, dropping the oldest one when full."""
        if len(self._snapshots) == self.limit:
            logger.debug("Undo stack full, dropping oldest snapshot")
        self._snapshots.append(snapshot)

    def pop(self) -> Optional[Snapshot]:
        """Remove and return the newest snapshot, or None when empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def peek(self) -> Optional[Snapshot]:
        return self._snapshots[-1] if self._snapshots else None

    def clear(self) -> None:
        self._snapshots.clear()

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize snapshots, oldest first."""
        return [s.to_dict() for s in self._snapshots]

    @classmethod
    def from_list(
        cls, data: Iterable[Dict[str, Any]], limit: int = UNDO_STACK_LIMIT
    ) -> "UndoStack":
        """Deserialize snapshots, oldest first."""
        return cls((Snapshot.from_dict(s) for s in data), limit=limit)
