from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class StartOnly:
    start: date


@dataclass(frozen=True)
class Complete:
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"end {self.end} is before start {self.start}")

    @property
    def days(self) -> int:
        """Inclusive day count of the selected range."""
        return (self.end - self.start).days + 1


SelectionState = Union[Empty, StartOnly, Complete]


def selection_bounds(state: SelectionState) -> tuple[date | None, date | None]:
    if isinstance(state, Complete):
        return state.start, state.end
    if isinstance(state, StartOnly):
        return state.start, None
    return None, None
