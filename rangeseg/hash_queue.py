"""FIFO queue of pixel coordinates that remembers every pushed coordinate."""

from __future__ import annotations

from collections import deque

from rangeseg.pixel_coords import PixelCoord


class HashQueue:
    """First-in first-out queue with membership over everything ever pushed.

    Membership is not cleared by :meth:`pop`: a coordinate stays known to the
    queue once it has been pushed.
    """

    def __init__(self, estimated_size: int = 0) -> None:
        # estimated_size is only a hint; Python containers grow on demand
        self._estimated_size = estimated_size
        self._queue: deque[PixelCoord] = deque()
        self._seen: set[tuple[int, int]] = set()

    def push(self, coord: PixelCoord) -> None:
        """Append a coordinate to the back of the queue."""
        self._seen.add((coord.row, coord.col))
        self._queue.append(coord)

    def pop(self) -> PixelCoord:
        """Remove and return the front coordinate."""
        if not self._queue:
            raise IndexError("pop from an empty HashQueue")
        return self._queue.popleft()

    def front(self) -> PixelCoord:
        """Return the front coordinate without removing it."""
        if not self._queue:
            raise IndexError("front of an empty HashQueue")
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, PixelCoord):
            return False
        return (coord.row, coord.col) in self._seen


__all__ = ["HashQueue"]