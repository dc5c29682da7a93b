"""Tests for Snapshot."""

import pytest

from loblabel.ingest.snapshot import SNAPSHOT_COLUMNS, Snapshot


class TestSnapshot:
    """Tests for building snapshots from rows."""

    def test_columns_layout(self):
        """Input columns are timestamp, bid prices, bid qtys, ask prices, ask qtys."""
        assert len(SNAPSHOT_COLUMNS) == 21
        assert SNAPSHOT_COLUMNS[0] == "local_timestamp"
        assert SNAPSHOT_COLUMNS[1:6] == [f"bid_price_{i}" for i in range(1, 6)]
        assert SNAPSHOT_COLUMNS[6:11] == [f"bid_qty_{i}" for i in range(1, 6)]
        assert SNAPSHOT_COLUMNS[11:16] == [f"ask_price_{i}" for i in range(1, 6)]
        assert SNAPSHOT_COLUMNS[16:21] == [f"ask_qty_{i}" for i in range(1, 6)]

    def test_from_values(self):
        """from_values maps values in column order onto levels."""
        # GIVEN values where each one encodes its column position
        values = [float(i) for i in range(len(SNAPSHOT_COLUMNS))]

        # WHEN we build a snapshot
        snapshot = Snapshot.from_values(values)

        # THEN each side gets its five levels in order
        assert snapshot.timestamp_ms == 0.0
        assert snapshot.bid_prices == (1.0, 2.0, 3.0, 4.0, 5.0)
        assert snapshot.bid_qtys == (6.0, 7.0, 8.0, 9.0, 10.0)
        assert snapshot.ask_prices == (11.0, 12.0, 13.0, 14.0, 15.0)
        assert snapshot.ask_qtys == (16.0, 17.0, 18.0, 19.0, 20.0)
        assert snapshot.best_bid == 1.0
        assert snapshot.best_ask == 11.0

    def test_from_values_wrong_length(self):
        """The wrong number of values raises ValueError."""
        with pytest.raises(ValueError, match="expected 21 values"):
            Snapshot.from_values([1.0] * 20)
