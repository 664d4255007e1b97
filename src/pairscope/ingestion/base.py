"""Abstract base class for trade snapshot sources."""

from abc import ABC, abstractmethod

from pairscope.ingestion.models import Trade


class TradeSource(ABC):
    """Interface for anything that hands the chart pipeline a trade snapshot."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this source, e.g. a file name."""
        ...

    @abstractmethod
    def load_trades(self) -> list[Trade]:
        """Return the current snapshot, ordered by timestamp ascending."""
        ...
