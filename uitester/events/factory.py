"""
Factory for creating event observers.
"""

from typing import List, Sequence, Union

from uitester.utils import logger

from .base import EventObserver
from .observers import BufferedObserver, NullEventObserver, RichTerminalObserver
from .types import EventObserverType


class EventObserverFactory:
    """Factory for creating event observers from their configured types."""

    @staticmethod
    def create_observers(
        observer_types: Sequence[Union[EventObserverType, str]],
    ) -> List[EventObserver]:
        """Create event observers.

        Args:
            observer_types: Observer types to create; plain strings are
                accepted as they appear in settings

        Returns:
            List of event observer instances; unknown types are skipped
        """
        observers: List[EventObserver] = []

        for raw_type in observer_types:
            try:
                observer_type = EventObserverType(raw_type)
            except ValueError:
                logger.warning(f"Skipping unknown event observer type: {raw_type}")
                continue

            if observer_type == EventObserverType.NULL:
                observers.append(NullEventObserver())
            elif observer_type == EventObserverType.RICH_TERMINAL:
                observers.append(RichTerminalObserver())
            elif observer_type == EventObserverType.BUFFERED:
                observers.append(BufferedObserver())

        return observers
