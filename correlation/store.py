import math
from itertools import islice
from typing import Callable, Iterator, List, Optional, Tuple


class SampleStore:
    """
    Fixed-capacity storage for paired (X, Y) samples.

    Both buffers are allocated once and never resized. When the store is
    full, ``add`` either rejects the sample or, in running mode, overwrites
    the oldest slot in circular order (sliding window).
    """

    def __init__(self, capacity: int = 20):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")

        self._capacity = capacity
        self._count = 0
        self._cursor = 0
        self.xs: List[float] = [0.0] * capacity
        self.ys: List[float] = [0.0] * capacity

        self.running = False

        # Called after every successful mutation
        self.on_change: Optional[Callable[[], None]] = None

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    def _in_range(self, idx: int) -> bool:
        return 0 <= idx < self._count

    def add(self, x: float, y: float) -> bool:
        """Store a pair. Returns False when full and not running."""
        if self._count < self._capacity:
            self.xs[self._count] = x
            self.ys[self._count] = y
            self._count += 1
        elif self.running:
            self.xs[self._cursor] = x
            self.ys[self._cursor] = y
            self._cursor = (self._cursor + 1) % self._capacity
        else:
            return False

        self._changed()
        return True

    def clear(self) -> None:
        self._count = 0
        self._cursor = 0
        self._changed()

    def count(self) -> int:
        return self._count

    def size(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Slot the next running-mode overwrite will land in."""
        return self._cursor

    # --- Direct slot access (debugging / tests) ---

    def set_xy(self, idx: int, x: float, y: float) -> bool:
        if not self._in_range(idx):
            return False
        self.xs[idx] = x
        self.ys[idx] = y
        self._changed()
        return True

    def set_x(self, idx: int, x: float) -> bool:
        if not self._in_range(idx):
            return False
        self.xs[idx] = x
        self._changed()
        return True

    def set_y(self, idx: int, y: float) -> bool:
        if not self._in_range(idx):
            return False
        self.ys[idx] = y
        self._changed()
        return True

    def get_x(self, idx: int) -> float:
        # Out of range reads return 0.0 instead of failing; check count() first.
        if not self._in_range(idx):
            return 0.0
        return self.xs[idx]

    def get_y(self, idx: int) -> float:
        if not self._in_range(idx):
            return 0.0
        return self.ys[idx]

    def pairs(self) -> Iterator[Tuple[float, float]]:
        """Iterate the live (x, y) pairs in slot order."""
        for i in range(self._count):
            yield self.xs[i], self.ys[i]

    # --- Statistics ---
    # Empty store returns NaN for all four.

    def min_x(self) -> float:
        if self._count == 0:
            return math.nan
        return min(islice(self.xs, self._count))

    def max_x(self) -> float:
        if self._count == 0:
            return math.nan
        return max(islice(self.xs, self._count))

    def min_y(self) -> float:
        if self._count == 0:
            return math.nan
        return min(islice(self.ys, self._count))

    def max_y(self) -> float:
        if self._count == 0:
            return math.nan
        return max(islice(self.ys, self._count))
