"""Shared fixtures for snapshot CSV files."""

import gzip
from pathlib import Path

import pytest

from loblabel.ingest.snapshot import SNAPSHOT_COLUMNS


def make_row(
    ts: float,
    bid: float = 100.0,
    ask: float = 101.0,
    bid_qty: float = 10.0,
    ask_qty: float = 10.0,
) -> list[float]:
    """Build one row in SNAPSHOT_COLUMNS order.

    Deeper levels step one tick away from the touch with quantity 1.0.
    """
    bid_prices = [bid - i for i in range(5)]
    ask_prices = [ask + i for i in range(5)]
    bid_qtys = [bid_qty, 1.0, 1.0, 1.0, 1.0]
    ask_qtys = [ask_qty, 1.0, 1.0, 1.0, 1.0]
    return [ts, *bid_prices, *bid_qtys, *ask_prices, *ask_qtys]


@pytest.fixture
def row_factory():
    """Return make_row for building snapshot rows."""
    return make_row


@pytest.fixture
def write_snapshot_csv(tmp_path: Path):
    """Factory writing rows (lists of values) to a CSV file under tmp_path.

    The file is gzip-compressed when the name ends in .gz.
    """

    def _write(
        rows: list[list],
        name: str = "book.csv",
        header: list[str] | None = None,
    ) -> str:
        lines = [",".join(header or SNAPSHOT_COLUMNS)]
        lines += [",".join(str(v) for v in row) for row in rows]
        text = "\n".join(lines) + "\n"
        path = tmp_path / name
        if name.endswith(".gz"):
            with gzip.open(path, "wt") as f:
                f.write(text)
        else:
            path.write_text(text)
        return str(path)

    return _write
