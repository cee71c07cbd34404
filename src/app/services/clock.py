from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Source of "now" for every time-dependent rule"""

    @abstractmethod
    def now(self) -> datetime:
        """Current instant as a naive UTC datetime"""
        pass
