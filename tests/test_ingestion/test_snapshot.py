"""Tests for loading JSON trade snapshots."""

import json

import pytest

from pairscope.ingestion.snapshot import JsonSnapshotSource, SnapshotError


def _raw(trade_id: str, timestamp: int) -> dict:
    return {
        "id": trade_id,
        "timestamp": str(timestamp),
        "inputVaultBalanceChange": {
            "token": {"address": "0xAAA", "symbol": "AAA"},
            "formattedAmount": "100",
        },
        "outputVaultBalanceChange": {
            "token": {"address": "0xBBB", "symbol": "BBB"},
            "formattedAmount": "-200",
        },
    }


class TestJsonSnapshotSource:
    def test_name(self, tmp_path):
        assert JsonSnapshotSource(tmp_path / "trades.json").name == "trades.json"

    def test_loads_list_sorted(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps([_raw("b", 2000), _raw("a", 1000)]))
        trades = JsonSnapshotSource(path).load_trades()
        assert [t.id for t in trades] == ["a", "b"]
        assert trades[0].timestamp == 1000

    def test_loads_object_with_trades(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps({"trades": [_raw("a", 1000)]}))
        assert len(JsonSnapshotSource(path).load_trades()) == 1

    def test_empty_list(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text("[]")
        assert JsonSnapshotSource(path).load_trades() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError, match="Cannot read"):
            JsonSnapshotSource(tmp_path / "nope.json").load_trades()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text("{not json")
        with pytest.raises(SnapshotError, match="not valid JSON"):
            JsonSnapshotSource(path).load_trades()

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps({"data": []}))
        with pytest.raises(SnapshotError, match="must be a list"):
            JsonSnapshotSource(path).load_trades()

    def test_invalid_record_names_index(self, tmp_path):
        bad = _raw("b", 2000)
        del bad["outputVaultBalanceChange"]
        path = tmp_path / "trades.json"
        path.write_text(json.dumps([_raw("a", 1000), bad]))
        with pytest.raises(SnapshotError, match="index 1"):
            JsonSnapshotSource(path).load_trades()

    def test_snapshot_error_is_value_error(self):
        assert issubclass(SnapshotError, ValueError)
