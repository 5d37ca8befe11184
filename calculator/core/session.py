"""
Calculation session: ordered in-memory log of completed calculations
"""

import logging
from typing import Callable, List, Optional

from calculator.models import CalculationRecord

logger = logging.getLogger(__name__)

EMPTY_HISTORY_MESSAGE = "No calculations yet"

class CalculationSession:
    """Holds the calculations of one running instance, oldest first"""

    def __init__(self, max_size: Optional[int] = None):
        self._records: List[CalculationRecord] = []
        self._listeners: List[Callable[["CalculationSession"], None]] = []
        self.max_size = max_size

    def __len__(self) -> int:
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def subscribe(self, listener: Callable[["CalculationSession"], None]):
        """Register a display sink notified after every append and clear"""
        self._listeners.append(listener)

    def append(self, record: CalculationRecord):
        self._records.append(record)

        # Keep only the newest entries when a cap is configured
        if self.max_size is not None and len(self._records) > self.max_size:
            self._records = self._records[-self.max_size:]

        logger.debug(f"History now holds {len(self._records)} calculations")
        self._notify()

    def entries(self) -> List[str]:
        """Display strings of the stored records, without numbering"""
        return [record.display() for record in self._records]

    def render(self) -> List[str]:
        """
        Numbered display lines in insertion order.

        An empty session renders as the single EMPTY_HISTORY_MESSAGE line; use
        is_empty to tell it apart from a real entry.
        """
        if not self._records:
            return [EMPTY_HISTORY_MESSAGE]
        return [f"{index}. {entry}" for index, entry in enumerate(self.entries(), 1)]

    def clear(self):
        self._records = []
        logger.debug("History cleared")
        self._notify()

    def _notify(self):
        for listener in self._listeners:
            listener(self)
