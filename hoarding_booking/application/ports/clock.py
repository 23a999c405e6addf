from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class ClockPort(ABC):
    @abstractmethod
    def today(self) -> date:
        """Current wall-clock date in the booking timezone."""
        raise NotImplementedError
