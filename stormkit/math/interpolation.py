"""Interpolation between two values over a progress in [0, 1]."""

from stormkit.math.scalar import lerp


class Interpolation:
    """Tracks a linear interpolation from ``start`` to ``end``."""

    def __init__(self, start: float, end: float) -> None:
        self._start = start
        self._end = end
        self._progress = 0.0

    def __repr__(self) -> str:
        return f"Interpolation(start={self._start!r}, end={self._end!r}, progress={self._progress!r})"

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def progress(self) -> float:
        return self._progress

    def get(self) -> float:
        """The current interpolated value."""
        return lerp(self._start, self._end, self._progress)

    def set(self, start: float, end: float) -> None:
        """Set both ends and restart progress."""
        self._start = start
        self._end = end
        self._progress = 0.0

    def update(self, end: float) -> None:
        """Retarget to ``end``, continuing from the current value."""
        self._start = self.get()
        self._end = end
        self._progress = 0.0

    def advance(self, progress: float) -> None:
        """Add to the progress, capping it at 1."""
        self._progress = min(self._progress + progress, 1.0)