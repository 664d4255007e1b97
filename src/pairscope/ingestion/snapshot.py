"""JSON trade snapshots exported by the data layer.

A snapshot file is either a JSON list of trade objects or an object with a
``trades`` list. Field names may be snake_case or the camelCase used by the
subgraph (``inputVaultBalanceChange``, ``formattedAmount``...).
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pairscope.ingestion.base import TradeSource
from pairscope.ingestion.models import Trade

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """A snapshot file could not be read or a record is structurally invalid."""


class JsonSnapshotSource(TradeSource):
    """Loads a trade snapshot from a JSON file on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return self._path.name

    def _read_records(self) -> list:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as exc:
            raise SnapshotError(f"Cannot read snapshot {self._path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Snapshot {self._path} is not valid JSON: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("trades")
        if not isinstance(data, list):
            raise SnapshotError(
                f"Snapshot {self._path} must be a list of trades or an object with 'trades'"
            )
        return data

    def load_trades(self) -> list[Trade]:
        trades: list[Trade] = []
        for index, raw in enumerate(self._read_records()):
            try:
                trades.append(Trade.model_validate(raw))
            except ValidationError as exc:
                raise SnapshotError(
                    f"Invalid trade at index {index} in {self._path}: {exc}"
                ) from exc
        logger.info("Loaded %d trades from %s", len(trades), self._path)
        return sorted(trades, key=lambda t: t.timestamp)
