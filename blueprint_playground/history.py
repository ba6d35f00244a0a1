"""Linear edit history with a cursor.

Snapshots are tuples of frozen walls, so restoring one can never alias a
list that is later mutated in place. Undo moves the cursor back; committing
after an undo discards the undone future. There is no redo.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from loguru import logger

from .geometry import Segment, SegmentSet

EMPTY_SNAPSHOT: SegmentSet = ()


class EditHistory:
    def __init__(self) -> None:
        self._snapshots: List[SegmentSet] = [EMPTY_SNAPSHOT]
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> Tuple[SegmentSet, ...]:
        return tuple(self._snapshots)

    @property
    def current(self) -> SegmentSet:
        return self._snapshots[self._cursor]

    def __len__(self) -> int:
        return len(self._snapshots)

    def can_undo(self) -> bool:
        return self._cursor > 0

    def commit(self, segments: Iterable[Segment]) -> SegmentSet:
        """Truncate any undone future and append ``segments`` as the new head."""
        snapshot: SegmentSet = tuple(segments)
        dropped = len(self._snapshots) - (self._cursor + 1)
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1
        logger.debug(
            "history commit: step={} walls={} dropped_future={}", self._cursor, len(snapshot), dropped
        )
        return snapshot

    def undo(self) -> Optional[SegmentSet]:
        """Step back one snapshot; ``None`` when already at the empty start."""
        if self._cursor == 0:
            logger.debug("history undo ignored at initial state")
            return None
        self._cursor -= 1
        logger.debug("history undo: step={}", self._cursor)
        return self._snapshots[self._cursor]

    def clear(self) -> SegmentSet:
        self._snapshots = [EMPTY_SNAPSHOT]
        self._cursor = 0
        logger.debug("history cleared")
        return EMPTY_SNAPSHOT


__all__ = ["EMPTY_SNAPSHOT", "EditHistory"]
