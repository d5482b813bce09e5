"""Countdown between sets."""
from __future__ import annotations

PRESET_SECONDS = (60, 90, 120, 180, 300)

def format_time(seconds: int) -> str:
    "m:ss, e.g. 90 -> 1:30"
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins}:{secs:02d}"

class RestTimer:
    def __init__(self, initial: int = 90):
        if initial <= 0:
            raise ValueError("rest time must be positive")
        self.total = initial
        self.time_left = initial
        self.running = False

    @property
    def finished(self) -> bool:
        return self.time_left == 0

    @property
    def progress(self) -> float:
        """Fraction of the rest still left, 1.0 -> 0.0 linearly."""
        return self.time_left / self.total

    def toggle(self) -> bool:
        if self.finished:
            return False
        self.running = not self.running
        return self.running

    def tick(self) -> int:
        """Advance one second while running; stops itself at zero."""
        if not self.running:
            return self.time_left
        if self.time_left <= 1:
            self.time_left = 0
            self.running = False
        else:
            self.time_left -= 1
        return self.time_left

    def reset(self) -> None:
        self.running = False
        self.time_left = self.total

    def select(self, seconds: int) -> None:
        if seconds <= 0:
            raise ValueError("rest time must be positive")
        self.total = seconds
        self.time_left = seconds
        self.running = False

    def __str__(self) -> str:
        return format_time(self.time_left)
