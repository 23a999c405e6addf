from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BookedInterval:
    start_day: date
    end_day: date  # inclusive

    def __post_init__(self) -> None:
        if self.start_day > self.end_day:
            raise ValueError(f"start_day {self.start_day} is after end_day {self.end_day}")
