from __future__ import annotations


class CountdownTimer:
    """Countdown in milliseconds that triggers once it reaches zero.

    The timer only moves when ``tick`` is called by its owner. Once triggered
    it stays at zero until ``reset`` or ``set_duration``.
    """

    def __init__(self, start_duration: int) -> None:
        if start_duration <= 0:
            raise ValueError(f"Timer duration must be positive, got {start_duration}")
        self._start_duration = start_duration
        self._remaining = start_duration
        self._triggered = False

    @property
    def start_duration(self) -> int:
        """Duration restored on every reset, in ms."""
        return self._start_duration

    @property
    def remaining(self) -> int:
        """Time left in ms, never negative."""
        return self._remaining

    def tick(self, delta_time: int) -> None:
        self._remaining -= delta_time
        if self._remaining <= 0:
            self._remaining = 0
            self._triggered = True

    def is_triggered(self) -> bool:
        return self._triggered

    def set_duration(self, new_duration: int) -> None:
        """Change the reset duration and restart the countdown from it."""
        if new_duration <= 0:
            raise ValueError(f"Timer duration must be positive, got {new_duration}")
        self._start_duration = new_duration
        self.reset()

    def reset(self) -> None:
        self._remaining = self._start_duration
        self._triggered = False

    def formatted(self) -> str:
        """Return the remaining time as ``MM:SS``."""
        minutes, seconds = divmod(self._remaining // 1000, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def __str__(self) -> str:
        return self.formatted()
